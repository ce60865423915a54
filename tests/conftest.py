"""Shared fixtures: on-disk catalogs, image sets and exported PNGs."""

import json
import os

import pytest

# 2024-01-01T00:00:00Z and one day later, in nanoseconds.
OLD_MTIME_NS = 1_704_067_200 * 1_000_000_000
NEW_MTIME_NS = OLD_MTIME_NS + 86_400 * 1_000_000_000

XCODE_INFO = {"author": "xcode", "version": 1}


def write_file(path, content: bytes = b"png", mtime_ns: int = OLD_MTIME_NS):
    path.write_bytes(content)
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


def read_manifest(image_set_path):
    return json.loads((image_set_path / "Contents.json").read_text(encoding="utf-8"))


@pytest.fixture
def source_dir(tmp_path):
    """Flat export folder."""
    d = tmp_path / "export"
    d.mkdir()
    return d


@pytest.fixture
def destination_dir(tmp_path):
    """Folder holding the .xcassets catalogs."""
    d = tmp_path / "Resources"
    d.mkdir()
    return d


@pytest.fixture
def make_image_set(destination_dir):
    """Factory: create <catalog>/<name> with a Contents.json listing images."""
    def _make(name, images, catalog="Assets.xcassets"):
        image_set = destination_dir / catalog / name
        image_set.mkdir(parents=True)
        contents = {"images": images, "info": dict(XCODE_INFO)}
        (image_set / "Contents.json").write_text(json.dumps(contents, indent=2), encoding="utf-8")
        return image_set
    return _make
