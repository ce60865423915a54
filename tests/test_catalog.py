"""Tests for Contents.json parsing, serialization and discovery."""

import json

import pytest

from assetsync.catalog import (
    ImageSetContents,
    discover_catalogs,
    discover_image_sets,
    parse_contents,
    read_contents,
    write_contents,
)
from assetsync.errors import ManifestError


class TestImageSetContents:
    """Manifest model and the Xcode serialization format."""

    def test_unknown_keys_preserved_in_order(self):
        text = json.dumps({
            "images": [{"size": "60x60", "idiom": "iphone", "scale": "2x", "platform": "ios"}],
            "info": {"version": 1, "author": "xcode"},
            "properties": {"template-rendering-intent": "original"},
        })
        contents = parse_contents(text, "Contents.json")
        contents.images[0].filename = "appicon@2x.png"

        out = json.loads(contents.to_json())

        assert list(out) == ["images", "info", "properties"]
        assert list(out["images"][0]) == ["size", "idiom", "scale", "platform", "filename"]
        assert out["info"] == {"version": 1, "author": "xcode"}
        assert out["properties"] == {"template-rendering-intent": "original"}

    def test_to_json_pads_first_colon_only(self):
        contents = ImageSetContents({
            "images": [{"idiom": "universal", "scale": "1x", "filename": "logo.png"}],
            "info": {"author": "xcode", "version": 1},
        })

        text = contents.to_json()

        assert text.startswith('{\n  "images" : [\n    {\n      "idiom": "universal",')
        assert text.count('" : ') == 1
        assert not text.endswith("\n")

    def test_to_json_keeps_non_ascii(self):
        contents = ImageSetContents({"images": [{"idiom": "universal", "filename": "café.png"}], "info": {}})

        assert "café.png" in contents.to_json()

    def test_entry_accessors(self):
        contents = ImageSetContents({"images": [{"idiom": "mac", "scale": "2x"}], "info": {"version": 1}})
        image = contents.images[0]

        assert image.scale == "2x"
        assert image.filename is None
        assert image.appearances == []


class TestParseErrors:
    """Malformed manifests are fatal."""

    def test_invalid_json(self):
        with pytest.raises(ManifestError, match="invalid JSON"):
            parse_contents("{not json", "Logo.imageset/Contents.json", "Logo.imageset")

    @pytest.mark.parametrize(
        "text",
        [
            '[]',
            '{"info": {}}',
            '{"images": {}}',
            '{"images": ["a.png"]}',
            '{"images": [{"scale": "1x", "filename": 7}]}',
            '{"images": [{"scale": 2}]}',
            '{"images": [{"scale": "1x", "appearances": ["dark"]}]}',
            '{"images": [{"scale": "1x", "appearances": {"value": "dark"}}]}',
            '{"images": [{"scale": "1x", "appearances": [{"appearance": "luminosity"}]}]}',
        ],
    )
    def test_wrong_shape(self, text):
        with pytest.raises(ManifestError):
            parse_contents(text, "Contents.json")

    @pytest.mark.parametrize("filename", ["../../x.png", "sub/x.png", "..", ""])
    def test_filename_must_be_a_plain_name(self, filename):
        text = json.dumps({"images": [{"scale": "1x", "filename": filename}]})

        with pytest.raises(ManifestError, match="plain file name") as exc_info:
            parse_contents(text, "Logo.imageset/Contents.json", "Logo.imageset")

        assert exc_info.value.image_set == "Logo.imageset"

    def test_entry_error_names_the_entry(self):
        text = json.dumps({"images": [{"scale": "1x"}, {"scale": "2x", "filename": 7}]})

        with pytest.raises(ManifestError, match=r"images\[1\] \"filename\" is not a string"):
            parse_contents(text, "Contents.json")

    def test_missing_manifest(self, tmp_path):
        image_set = tmp_path / "Logo.imageset"
        image_set.mkdir()

        with pytest.raises(ManifestError, match="not found") as exc_info:
            read_contents(str(image_set))

        assert exc_info.value.image_set == "Logo.imageset"
        assert exc_info.value.path == str(image_set / "Contents.json")


class TestReadWrite:
    def test_round_trip_on_disk(self, tmp_path):
        image_set = tmp_path / "Logo.imageset"
        image_set.mkdir()
        (image_set / "Contents.json").write_text(
            json.dumps({"images": [{"idiom": "universal", "scale": "1x"}], "info": {"version": 1}}),
            encoding="utf-8",
        )

        contents = read_contents(str(image_set))
        contents.images[0].filename = "logo.png"
        write_contents(str(image_set), contents)

        assert read_contents(str(image_set)).images[0].filename == "logo.png"


class TestDiscovery:
    """Only directories with the right extension are picked up, sorted."""

    def test_discover_catalogs(self, tmp_path):
        (tmp_path / "Media.xcassets").mkdir()
        (tmp_path / "Assets.xcassets").mkdir()
        (tmp_path / "Other").mkdir()
        (tmp_path / "Fake.xcassets.zip").write_bytes(b"")
        (tmp_path / "File.xcassets").write_bytes(b"")

        assert discover_catalogs(str(tmp_path)) == ["Assets.xcassets", "Media.xcassets"]

    def test_discover_image_sets(self, tmp_path):
        for name in ("Logo.imageset", "AppIcon.appiconset", "Brand.colorset", "Folder"):
            (tmp_path / name).mkdir()

        assert discover_image_sets(str(tmp_path)) == ["AppIcon.appiconset", "Logo.imageset"]
