from nippon.assets import DefaultVertex, GameObject, ModelDivision, ModelEntry, ModelGroup


def test_default_vertex_is_zeroed():
    vertex = DefaultVertex()
    assert vertex.position == (0.0, 0.0, 0.0)
    assert vertex.texture_map == (0.0, 0.0)
    assert vertex.texture_uv == (0.0, 0.0)
    assert vertex.color_weight == 0


def test_division_collects_vertices_and_elements():
    division = ModelDivision()
    first = DefaultVertex(position=(1.0, 2.0, 3.0), color_weight=7)
    second = DefaultVertex(texture_uv=(4.0, 5.0))
    division.add_vertex(first)
    division.add_vertex(second)
    for element in (0, 1, 2):
        division.add_element(element)
    assert division.vertices == [first, second]
    assert division.vertex_count == 2
    assert division.elements == [0, 1, 2]
    assert division.element_count == 3


def test_division_elements_are_sixteen_bit():
    division = ModelDivision()
    division.add_element(0x12345)
    division.add_element(0xFFFF)
    assert division.elements == [0x2345, 0xFFFF]


def test_entry_sequence_protocol():
    entry = ModelEntry(5, 0x20)
    divisions = [ModelDivision(), ModelDivision(elements=[1])]
    for division in divisions:
        entry.add_division(division)
    assert len(entry) == 2
    assert list(entry) == divisions
    assert entry[1] is divisions[1]
    assert entry.id == 5
    assert entry.type == 0x20
    assert entry.scale == (0.0, 0.0, 0.0)


def test_group_sequence_protocol():
    group = ModelGroup("r100")
    entries = [ModelEntry(1, 2), ModelEntry(3, 4)]
    for entry in entries:
        group.add_entry(entry)
    assert group.name == "r100"
    assert len(group) == 2
    assert [item.id for item in group] == [1, 3]
    assert group[0] is entries[0]


def test_groups_do_not_share_entries():
    first = ModelGroup("a")
    second = ModelGroup("b")
    first.add_entry(ModelEntry(1, 1))
    assert len(second) == 0


def test_game_object_fields():
    obj = GameObject(id=3, category=9, position=(1.0, 2.0, 3.0))
    assert obj.id == 3
    assert obj.category == 9
    assert obj.position == (1.0, 2.0, 3.0)
    assert obj.rotation == (0.0, 0.0, 0.0)