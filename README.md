# nippon

Tools for the data files of a PC game release. It decrypts and unpacks
the game's nested archives. It checks the installed files against a
CRC-32 integrity map. It also reads level geometry and object placements
into a small scene graph of actors and components.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `nippon-packer`. It runs one operation
of `nippon.packer.Packer`:

```
nippon-packer unpack   [--config Config.json] [--packer Packer.json]
nippon-packer repack   [--config Config.json]
nippon-packer check    [--config Config.json] [--integrity Integrity.json]
nippon-packer generate [--config Config.json] [--integrity Integrity.json]
```

- `unpack` decrypts every configured source file and extracts its
  archive tree into the unpack directory, in one folder per level.
- `repack` lists the files found below the unpack directory. It writes
  nothing.
- `check` compares the CRC-32 of every file below `<gameDir>/data_pc`
  with the integrity map. It prints `[Ok]` or `[Failed]` for each file
  and exits with status 1 if any file is missing from the map or does
  not match.
- `generate` writes the integrity map for the current installation.

The defaults are `Config.json`, `Packer.json` and `Integrity.json` in the
current directory. The packer configuration is read only for `unpack`.

### Configuration

The general configuration names the game installation and the directory
that unpacked files go to:

```json
{
  "gameDir": "/games/install",
  "unpackDir": "/games/unpacked"
}
```

The packer configuration holds the cipher key and the sources to unpack.
Each entry of a group under `sources` gives the following:

- the directory below `data_pc` to scan (`sourceDir`);
- the file extensions to take (`extensions`);
- the sub-directory to unpack into (`unpackDir`);
- a pattern whose `X` characters pick the characters of each file's stem
  that make up the level folder name (`selectExpr`).

```json
{
  "encryptionKey": "placeholder",
  "sources": {
    "levels": [
      {
        "sourceDir": "stage",
        "extensions": [".dat"],
        "unpackDir": "r1",
        "selectExpr": "__XX"
      }
    ]
  }
}
```

The unpacked files go to `<unpackDir>/<group>/<entry unpackDir>/<level>/`.

## Library use

### Decryption and checksums

```python
from nippon.blowfish import BlowFish
from nippon.checksum import crc32

cipher = BlowFish("placeholder")
plain = cipher.decrypt(encrypted_bytes)
print(f"{crc32(plain, 4096):08X}")
```

`BlowFish.encrypt` and `BlowFish.decrypt` transform each whole 8-byte
block, using little-endian halves. A trailing partial block is left as
it is. `encrypt_block` and `decrypt_block` transform one pair of 32-bit
halves. `crc32` accepts bytes or a string. Its chunk size defaults to
4096.

### Archives

```python
from nippon.archive import ArchiveNode

root = ArchiveNode(plain)
for child in root:
    print(child.type, child.name, child.size, child.is_archive)
root.extract_recursive("out/level")
```

An `ArchiveNode` recognises the archive's table-of-contents format and
builds a tree of nested archives. Anything that is not an archive is a
leaf file. Children are ordered by type. `extract_recursive` writes each
non-empty leaf as `<name>.<TYPE>`. A leaf without a name is named after
its CRC-32. An existing file is replaced only by a larger one.

### Models and objects

```python
from nippon.serializers import read_model_group, read_objects

group = read_model_group("out/level/stage.SCR")
for entry in group:
    for division in entry:
        print(entry.id, division.vertex_count, division.element_count)

objects = read_objects("out/level/stage.TSC")
```

`parse_model_group` and `parse_objects` do the same for bytes already in
memory. Bad magic numbers and truncated tables raise
`nippon.serializers.FormatError`. The loaded data lives in
`nippon.assets`, in `ModelGroup`, `ModelEntry`, `ModelDivision`,
`DefaultVertex` and `GameObject`.

### Scenes

`nippon.scene.Scene` reads every `.TSC`, `.TRE`, `.TAT` and `.SCR` file
in `<unpack_dir>/levels/<region>/<level>`. It then builds the following
actors:

- a `Player` actor that carries a `Camera`;
- one actor per model group, with a child per entry that holds the
  entry's transform;
- a child per division, linked to that division.

Each call to `Scene.update` does three things:

- it moves the player according to the `InputState`;
- it fills `scene.render_tasks` with `RenderTask` records;
- it fills `scene.debug_lines` with `DebugLine` records for the world
  axes and each actor's axes.

```python
from nippon.events import Action, InputState, KeyCode
from nippon.scene import Scene

state = InputState()
scene = Scene("/games/unpacked", "r1", "00", state)

state.poll({KeyCode.W: Action.PRESS})
scene.update(1 / 60)
camera = scene.main_camera()
view = camera.view_matrix()
projection = camera.projection_matrix()
```

`InputState.poll` advances one frame. Keys and buttons that are not
mentioned count as released. A press reads as down for one frame and
held afterwards. Releasing a held key reads as up for one frame.
`Camera.projection_matrix` takes an optional `nippon.window.Window`. A
1920×1080 window is used if none is given.

### Helpers

- `nippon.binary_reader`: `BinaryReader`, `align_up`, `align_down`.
- `nippon.text`: `cut_front`, `cut_back`, `remove_nulls`, `posix_path`,
  `select_expr`.
- `nippon.fileio`: `read_binary`, `read_text`, `write_binary`,
  `write_text`, `create_if_not_exists`, `to_string_set`,
  `files_with_extension`.
- `nippon.file_node`: `FileNode`, a sorted tree of the files below a
  path.

## What it does not do

- There is no viewer or editor window. The package draws nothing. It
  only produces the matrices, render tasks and debug lines that a
  renderer would use.
- It does not build or encrypt archives. `repack` only lists the
  unpacked files.
- It does not write changed scenes or models back to disk.