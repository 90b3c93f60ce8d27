import json
import struct

import pytest

from nippon.blowfish import BlowFish
from nippon.checksum import crc32
from nippon.packer import Packer, main

ENCRYPTION_KEY = "placeholder"
PAYLOAD = b"PAYLOAD!"


def build_archive(name, kind, payload):
    header = struct.pack("<II4s", 1, 32, kind)
    return header + name.ljust(20, b"\0") + payload + bytes(25)


@pytest.fixture
def setup(tmp_path):
    game_dir = tmp_path / "game"
    source_dir = game_dir / "data_pc" / "st"
    source_dir.mkdir(parents=True)
    archive = build_archive(b"model", b"DDS", PAYLOAD)
    (source_dir / "st_r100.dat").write_bytes(BlowFish(ENCRYPTION_KEY).encrypt(archive))
    (source_dir / "notes.txt").write_bytes(b"not an archive")
    config = {"gameDir": str(game_dir), "unpackDir": str(tmp_path / "out")}
    packer_config = {
        "encryptionKey": ENCRYPTION_KEY,
        "sources": {
            "levels": [
                {"extensions": [".dat"], "unpackDir": "lvl", "sourceDir": "st", "selectExpr": "___XXXX"}
            ]
        },
    }
    return tmp_path, config, packer_config


def test_unpack_extracts_decrypted_archive(setup):
    tmp_path, config, packer_config = setup
    packer = Packer(config, packer_config, tmp_path / "Integrity.json")
    unpacked = packer.unpack()
    assert [path.name for path in unpacked] == ["st_r100.dat"]
    extracted = tmp_path / "out" / "levels" / "lvl" / "r100" / "model.DDS"
    assert extracted.read_bytes() == PAYLOAD


def test_unpack_logs_relative_path(setup, capsys):
    tmp_path, config, packer_config = setup
    Packer(config, packer_config, tmp_path / "Integrity.json").unpack()
    output = capsys.readouterr().out
    assert "  Unpacking /st/st_r100.dat" in output
    assert "Unpacking finished successfully!" in output


def test_unpack_missing_source_dir(setup):
    tmp_path, config, packer_config = setup
    packer_config["sources"]["levels"][0]["sourceDir"] = "missing"
    with pytest.raises(FileNotFoundError):
        Packer(config, packer_config, tmp_path / "Integrity.json").unpack()


def test_generate_integrity_map(setup):
    tmp_path, config, _ = setup
    integrity_file = tmp_path / "Integrity.json"
    result = Packer(config, integrity_file=integrity_file).generate_integrity_map()
    data_dir = tmp_path / "game" / "data_pc" / "st"
    assert set(result) == {"/st/st_r100.dat", "/st/notes.txt"}
    assert result["/st/notes.txt"] == crc32((data_dir / "notes.txt").read_bytes())
    assert json.loads(integrity_file.read_text()) == result


def test_check_integrity_detects_changes(setup, capsys):
    tmp_path, config, _ = setup
    packer = Packer(config, integrity_file=tmp_path / "Integrity.json")
    packer.generate_integrity_map()
    assert packer.check_integrity() is True
    (tmp_path / "game" / "data_pc" / "st" / "notes.txt").write_bytes(b"changed")
    capsys.readouterr()
    assert packer.check_integrity() is False
    output = capsys.readouterr().out
    assert "  [Failed] /st/notes.txt" in output
    assert "  [Ok] /st/st_r100.dat" in output
    assert "Integrity check unsuccessful!" in output


def test_check_integrity_missing_key_fails(setup):
    tmp_path, config, _ = setup
    integrity_file = tmp_path / "Integrity.json"
    integrity_file.write_text(json.dumps({}))
    assert Packer(config, integrity_file=integrity_file).check_integrity() is False


def test_missing_data_dir(tmp_path):
    packer = Packer({"gameDir": str(tmp_path / "nowhere"), "unpackDir": str(tmp_path)},
                    integrity_file=tmp_path / "Integrity.json")
    with pytest.raises(FileNotFoundError):
        packer.generate_integrity_map()


def test_repack_reports(capsys):
    Packer({"gameDir": ".", "unpackDir": "."}).repack()
    output = capsys.readouterr().out
    assert "Repacking finished successfully!" in output


def test_main_generate_and_check(setup):
    tmp_path, config, _ = setup
    config_file = tmp_path / "Config.json"
    config_file.write_text(json.dumps(config))
    integrity_file = tmp_path / "Integrity.json"
    common = ["--config", str(config_file), "--integrity", str(integrity_file)]
    assert main(["generate", *common]) == 0
    assert integrity_file.exists()
    assert main(["check", *common]) == 0
    (tmp_path / "game" / "data_pc" / "st" / "notes.txt").write_bytes(b"changed")
    assert main(["check", *common]) == 1


def test_main_unpack(setup):
    tmp_path, config, packer_config = setup
    config_file = tmp_path / "Config.json"
    config_file.write_text(json.dumps(config))
    packer_file = tmp_path / "Packer.json"
    packer_file.write_text(json.dumps(packer_config))
    assert main(["unpack", "--config", str(config_file), "--packer", str(packer_file)]) == 0
    assert (tmp_path / "out" / "levels" / "lvl" / "r100" / "model.DDS").read_bytes() == PAYLOAD