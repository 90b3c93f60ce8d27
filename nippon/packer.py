"""Unpacking of the game's encrypted data archives and integrity checking of its data files."""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from nippon.archive import ArchiveNode
from nippon.blowfish import BlowFish
from nippon.checksum import crc32
from nippon.fileio import create_if_not_exists, read_binary, read_text, to_string_set, write_text
from nippon.text import cut_front, posix_path, select_expr

DATA_DIR_NAME = "data_pc"
DEFAULT_INTEGRITY_FILE = "Integrity.json"


def _log(message: str = "") -> None:
    print(message, file=sys.stdout)


class Packer:
    """Operations on a game installation described by the editor's configuration."""

    def __init__(
        self,
        config: Mapping[str, Any],
        packer_config: Mapping[str, Any] | None = None,
        integrity_file: str | os.PathLike = DEFAULT_INTEGRITY_FILE,
    ) -> None:
        self.config = config
        self.packer_config = packer_config if packer_config is not None else {}
        self.integrity_file = Path(integrity_file)

    @property
    def data_dir(self) -> Path:
        return Path(self.config["gameDir"]) / DATA_DIR_NAME

    @property
    def unpack_dir(self) -> Path:
        return Path(self.config["unpackDir"])

    def _relative_key(self, file: Path) -> str:
        return cut_front(posix_path(str(file)), len(posix_path(str(self.data_dir))))

    def _data_files(self) -> list[Path]:
        data_dir = self.data_dir
        if not data_dir.is_dir():
            raise FileNotFoundError(f"data directory not found: {data_dir}")
        return sorted(path for path in data_dir.rglob("*") if path.is_file())

    def unpack(self) -> list[Path]:
        """Decrypt every configured source archive and extract it per level; return the sources."""
        _log("Unpacking, please wait...")

        cypher = BlowFish(self.packer_config["encryptionKey"])
        data_dir = self.data_dir
        unpack_dir = self.unpack_dir
        create_if_not_exists(unpack_dir)

        unpacked = []
        for entry_name, entries in self.packer_config["sources"].items():
            create_if_not_exists(unpack_dir / entry_name)
            for entry in entries:
                extensions = to_string_set(entry["extensions"])
                target_root = unpack_dir / entry_name / entry["unpackDir"]
                create_if_not_exists(target_root)

                for file in sorted((data_dir / entry["sourceDir"]).iterdir()):
                    if file.suffix not in extensions or not file.is_file():
                        continue
                    level_name = select_expr(file.stem, entry["selectExpr"])
                    data = cypher.decrypt(read_binary(file))
                    level_dir = target_root / level_name
                    create_if_not_exists(level_dir)
                    ArchiveNode(data).extract_recursive(level_dir)
                    unpacked.append(file)
                    _log(f"  Unpacking {self._relative_key(file)}")

        _log("Unpacking finished successfully!")
        _log()
        return unpacked

    def repack(self) -> list[Path]:
        """Collect the unpacked files that a repack would take in; nothing is written."""
        _log("Repacking, please wait...")

        unpack_dir = self.unpack_dir
        candidates = (
            sorted(path for path in unpack_dir.rglob("*") if path.is_file())
            if unpack_dir.is_dir()
            else []
        )

        _log("Repacking finished successfully!")
        _log()
        return candidates

    def check_integrity(self) -> bool:
        """Compare every data file's CRC-32 with the integrity map; True if all match."""
        _log("Checking integrity, please wait...")

        integrity = json.loads(read_text(self.integrity_file))
        success = True
        for file in self._data_files():
            key = self._relative_key(file)
            expected = integrity.get(key)
            ok = expected is not None and expected == crc32(read_binary(file))
            success = success and ok
            _log(f"  [{'Ok' if ok else 'Failed'}] {key}")

        _log(f"Integrity check {'successful' if success else 'unsuccessful'}!")
        _log()
        return success

    def generate_integrity_map(self) -> dict[str, int]:
        """Write the CRC-32 of every data file to the integrity file and return the map."""
        _log("Generating integrity, please wait...")

        integrities: dict[str, int] = {}
        for file in self._data_files():
            key = self._relative_key(file)
            checksum = crc32(read_binary(file))
            integrities[key] = checksum
            _log(f"  0x{checksum:08X} {key}")

        write_text(self.integrity_file, json.dumps(integrities, indent=4))

        _log("Integrity generated successfully!")
        _log()
        return integrities


def _load_json(path: str) -> Any:
    return json.loads(read_text(path))


def main(argv: list[str] | None = None) -> int:
    """Run one packer operation from the command line."""
    parser = argparse.ArgumentParser(prog="nippon-packer", description=__doc__)
    parser.add_argument("command", choices=["unpack", "repack", "check", "generate"])
    parser.add_argument("--config", default="Config.json", help="editor configuration file")
    parser.add_argument("--packer", default="Packer.json", help="packer configuration file")
    parser.add_argument("--integrity", default=DEFAULT_INTEGRITY_FILE, help="integrity map file")
    args = parser.parse_args(argv)

    config = _load_json(args.config)
    packer_config = _load_json(args.packer) if args.command == "unpack" else {}
    packer = Packer(config, packer_config, args.integrity)

    if args.command == "unpack":
        packer.unpack()
    elif args.command == "repack":
        packer.repack()
    elif args.command == "check":
        return 0 if packer.check_integrity() else 1
    else:
        packer.generate_integrity_map()
    return 0


if __name__ == "__main__":
    sys.exit(main())