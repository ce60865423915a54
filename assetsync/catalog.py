"""
Asset catalog parsing: Contents.json manifests, catalog and image set discovery.

Reads the Xcode image set manifest into a thin model that keeps every key
of the original JSON (in order) so a rewrite only changes what the
reconciler deliberately touched.
"""

import json
import os

from .errors import FileOperationError, ManifestError


CATALOG_EXTENSION = ".xcassets"
IMAGE_SET_EXTENSIONS = (".imageset", ".appiconset")
CONTENTS_FILENAME = "Contents.json"


# ---------------------------------------------------------------------------
# Manifest model
# ---------------------------------------------------------------------------

class ImageSetImage:
    """One entry of the manifest's "images" array.

    Wraps the decoded dict in place: unknown keys (size, platform, subtype,
    ...) survive a rewrite untouched and in their original order.
    """
    def __init__(self, data: dict):
        self.data = data

    @property
    def scale(self) -> str:
        return self.data.get("scale") or "1x"

    @property
    def appearances(self) -> list[dict]:
        return self.data.get("appearances") or []

    @property
    def filename(self) -> str | None:
        return self.data.get("filename")

    @filename.setter
    def filename(self, value: str) -> None:
        # A previously absent key is appended after the existing ones.
        self.data["filename"] = value

    def __repr__(self) -> str:
        return f"ImageSetImage({self.data!r})"


class ImageSetContents:
    """A decoded Contents.json: ordered images plus the opaque info block."""
    def __init__(self, data: dict):
        self.data = data
        self.images = [ImageSetImage(d) for d in data["images"]]

    def to_json(self) -> str:
        """Serialize the way Xcode writes Contents.json."""
        text = json.dumps(self.data, indent=2, ensure_ascii=False)
        # Xcode pads only the first key/value delimiter with a space
        # before the colon; keep output byte-compatible with it.
        return text.replace('": ', '" : ', 1)


def parse_contents(text: str, contents_path: str, image_set: str | None = None) -> ImageSetContents:
    """Decode manifest text, validating the shape the reconciler relies on."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ManifestError(f"invalid JSON in {contents_path}: {e}", image_set=image_set, path=contents_path) from e

    if not isinstance(data, dict):
        raise ManifestError(f"{contents_path}: top level is not an object", image_set=image_set, path=contents_path)
    images = data.get("images")
    if not isinstance(images, list) or not all(isinstance(i, dict) for i in images):
        raise ManifestError(f"{contents_path}: \"images\" is not a list of objects", image_set=image_set, path=contents_path)
    for index, entry in enumerate(images):
        problem = _entry_problem(entry)
        if problem:
            raise ManifestError(f"{contents_path}: images[{index}] {problem}", image_set=image_set, path=contents_path)
    return ImageSetContents(data)


def _entry_problem(entry: dict) -> str | None:
    """Describe the first field the locator/reconciler can't use, or None."""
    filename = entry.get("filename")
    if filename is not None:
        if not isinstance(filename, str):
            return "\"filename\" is not a string"
        # Files live directly inside the image set folder.
        if not filename or filename in (".", "..") or os.path.basename(filename) != filename or "/" in filename:
            return f"\"filename\" is not a plain file name: {filename!r}"

    scale = entry.get("scale")
    if scale is not None and not isinstance(scale, str):
        return "\"scale\" is not a string"

    appearances = entry.get("appearances")
    if appearances is not None:
        if not isinstance(appearances, list) or not all(isinstance(a, dict) for a in appearances):
            return "\"appearances\" is not a list of objects"
        if appearances and not isinstance(appearances[0].get("value"), str):
            return "\"appearances\" entry has no string \"value\""

    return None


def read_contents(image_set_path: str) -> ImageSetContents:
    """Load <image_set_path>/Contents.json."""
    image_set = os.path.basename(image_set_path.rstrip(os.sep))
    contents_path = os.path.join(image_set_path, CONTENTS_FILENAME)
    if not os.path.isfile(contents_path):
        raise ManifestError(f"{CONTENTS_FILENAME} not found in {image_set_path}", image_set=image_set, path=contents_path)
    try:
        with open(contents_path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"cannot read {contents_path}: {e}", image_set=image_set, path=contents_path) from e
    return parse_contents(text, contents_path, image_set)


def write_contents(image_set_path: str, contents: ImageSetContents) -> None:
    image_set = os.path.basename(image_set_path.rstrip(os.sep))
    contents_path = os.path.join(image_set_path, CONTENTS_FILENAME)
    try:
        with open(contents_path, "w", encoding="utf-8") as f:
            f.write(contents.to_json())
    except OSError as e:
        raise FileOperationError(f"cannot write {contents_path}: {e}", image_set=image_set, path=contents_path) from e


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------

def _child_dirs(path: str, extensions: tuple[str, ...]) -> list[str]:
    return sorted(
        d for d in os.listdir(path)
        if os.path.splitext(d)[1] in extensions and os.path.isdir(os.path.join(path, d))
    )


def discover_catalogs(destination_dir: str) -> list[str]:
    """Return names of the .xcassets directories directly under destination_dir."""
    return _child_dirs(destination_dir, (CATALOG_EXTENSION,))


def discover_image_sets(catalog_path: str) -> list[str]:
    """Return names of the .imageset / .appiconset directories directly under catalog_path."""
    return _child_dirs(catalog_path, IMAGE_SET_EXTENSIONS)
