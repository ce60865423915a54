"""
Source image lookup for a single manifest entry.

Exported filenames rarely match the image set manifest 1:1, so the expected
export name is rebuilt from the image set name, appearance and scale.
A filename already recorded in the manifest wins when the source still has
it, which keeps manually renamed files stable.
"""

import os

from .catalog import ImageSetImage


SOURCE_EXTENSION = ".png"


# ---------------------------------------------------------------------------
# Naming rules
# ---------------------------------------------------------------------------

def image_set_base_name(image_set_path: str) -> str:
    """AppIcon.appiconset -> appicon, Button.Primary.imageset -> button-primary."""
    name = os.path.basename(image_set_path.rstrip(os.sep))
    stem, _ = os.path.splitext(name)
    return stem.replace(".", "-").lower()


def appearance_suffix(image: ImageSetImage) -> str:
    """'-<value>' of the first appearance only, '' when none are recorded."""
    appearances = image.appearances
    if not appearances:
        return ""
    return f"-{appearances[0].get('value')}"


def scale_suffix(image: ImageSetImage) -> str:
    return "" if image.scale == "1x" else f"@{image.scale}"


def candidate_filenames(image_set_path: str, image: ImageSetImage) -> list[str]:
    """Derived filenames to try, most specific first."""
    base = image_set_base_name(image_set_path)
    scale = scale_suffix(image)
    return [
        f"{base}{appearance_suffix(image)}{scale}{SOURCE_EXTENSION}",
        # Light is usually the implicit default and not listed in the manifest.
        f"{base}-light{scale}{SOURCE_EXTENSION}",
    ]


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def find_image_path(image_set_path: str, source_dir: str, image: ImageSetImage) -> str | None:
    """Return the source file that satisfies the entry, or None."""
    if image.filename:
        path = os.path.join(source_dir, image.filename)
        if os.path.isfile(path):
            return path

    for filename in candidate_filenames(image_set_path, image):
        path = os.path.join(source_dir, filename)
        if os.path.isfile(path):
            return path

    return None
