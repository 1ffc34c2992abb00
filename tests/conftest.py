import json
import struct
import sys
import zipfile
from pathlib import Path

import pytest

# Add src to sys.path so we can import genclass
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def write_jar(path: Path, entries: dict[str, bytes]) -> Path:
    """Write a jar containing the given entries, in the given order."""
    with zipfile.ZipFile(path, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


def damage_entry(
    jar: Path,
    name: str,
    *,
    data: bytes | None = None,
    method: int | None = None,
    flags: int | None = None,
) -> Path:
    """
    Corrupt one entry of a jar in place.

    data overwrites the start of the stored entry bytes; method rewrites the
    compression method and flags the general purpose flags, both in the local
    and in the central directory header.
    """
    with zipfile.ZipFile(jar) as zf:
        offset = zf.getinfo(name).header_offset
    raw = bytearray(jar.read_bytes())

    if data is not None:
        name_len, extra_len = struct.unpack("<HH", raw[offset + 26:offset + 30])
        start = offset + 30 + name_len + extra_len
        raw[start:start + len(data)] = data

    # (local header offset, central header offset) of each patched field
    fields = []
    if flags is not None:
        fields.append((6, 8, struct.pack("<H", flags)))
    if method is not None:
        fields.append((8, 10, struct.pack("<H", method)))

    encoded = name.encode("utf-8")
    for local_at, central_at, packed in fields:
        raw[offset + local_at:offset + local_at + 2] = packed
        pos = raw.find(b"PK\x01\x02")
        while pos != -1:
            (central_name_len,) = struct.unpack("<H", raw[pos + 28:pos + 30])
            if raw[pos + 46:pos + 46 + central_name_len] == encoded:
                raw[pos + central_at:pos + central_at + 2] = packed
            pos = raw.find(b"PK\x01\x02", pos + 1)

    jar.write_bytes(bytes(raw))
    return jar


def write_manifest(path: Path, units: list[dict]) -> Path:
    """Write a compilation manifest JSON file."""
    path.write_text(
        json.dumps({"schema_version": 1, "compilation_units": units}),
        encoding="utf-8",
    )
    return path


# Common test fixtures
@pytest.fixture
def scenario_units() -> list[dict]:
    """One generated and one hand-written unit in package com.x."""
    return [
        {
            "path": "com/x/A.java",
            "pkg": "com.x",
            "top_level": ["A"],
            "generated_by_annotation_processor": True,
        },
        {
            "path": "com/x/B.java",
            "pkg": "com.x",
            "top_level": ["B"],
            "generated_by_annotation_processor": False,
        },
    ]


@pytest.fixture
def scenario_jar(tmp_path: Path) -> Path:
    """Class jar matching scenario_units plus an unattributed class."""
    return write_jar(
        tmp_path / "classes.jar",
        {
            "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\r\n\r\n",
            "com/x/": b"",
            "com/x/A.class": b"\xca\xfe\xba\xbeA",
            "com/x/A$1.class": b"\xca\xfe\xba\xbeA$1",
            "com/x/B.class": b"\xca\xfe\xba\xbeB",
            "com/x/Unknown.class": b"\xca\xfe\xba\xbeUnknown",
        },
    )


@pytest.fixture
def scenario_manifest(tmp_path: Path, scenario_units: list[dict]) -> Path:
    return write_manifest(tmp_path / "manifest.json", scenario_units)


@pytest.fixture
def make_jar(tmp_path: Path):
    """Factory: make_jar(entries, name="classes.jar") -> Path."""
    def _make(entries: dict[str, bytes], name: str = "classes.jar") -> Path:
        return write_jar(tmp_path / name, entries)
    return _make


@pytest.fixture
def make_manifest(tmp_path: Path):
    """Factory: make_manifest(units, name="manifest.json") -> Path."""
    def _make(units: list[dict], name: str = "manifest.json") -> Path:
        return write_manifest(tmp_path / name, units)
    return _make


@pytest.fixture
def corrupt_entry():
    """Factory: corrupt_entry(jar, name, data=..., method=...) -> Path."""
    return damage_entry
