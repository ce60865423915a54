"""
Image set reconciliation.

Brings one image set in line with the source directory: every manifest
entry is located, classified, and copied in when new or changed.
Contents.json is rewritten once at the end, only if a filename changed.
"""

import enum
import os
import shutil

from .catalog import read_contents, write_contents
from .errors import FileOperationError
from .locator import find_image_path


class SyncOutcome(enum.Enum):
    UNASSIGNED = "unassigned"   # no filename on record, nothing found
    MISSING = "missing"         # filename on record, nothing found
    UPDATED = "updated"         # new or changed file copied in
    SKIPPED = "skipped"         # same size and mtime, left alone


class EntryOutcome:
    """Classification of one manifest entry."""
    def __init__(self, outcome: SyncOutcome, filename: str | None):
        self.outcome = outcome
        self.filename = filename

    def __eq__(self, other) -> bool:
        if not isinstance(other, EntryOutcome):
            return NotImplemented
        return (self.outcome, self.filename) == (other.outcome, other.filename)

    def __repr__(self) -> str:
        return f"EntryOutcome({self.outcome.name}, {self.filename!r})"


class ImageSetSyncResult:
    """Per-entry outcomes of one image set, in manifest order."""
    def __init__(self):
        self.entries: list[EntryOutcome] = []
        self.manifest_updated: bool = False

    def add(self, outcome: SyncOutcome, filename: str | None) -> None:
        self.entries.append(EntryOutcome(outcome, filename))

    def _filenames(self, outcome: SyncOutcome) -> list[str]:
        return [e.filename for e in self.entries if e.outcome is outcome]

    @property
    def unassigned(self) -> bool:
        return any(e.outcome is SyncOutcome.UNASSIGNED for e in self.entries)

    @property
    def updated(self) -> list[str]:
        return self._filenames(SyncOutcome.UPDATED)

    @property
    def missing(self) -> list[str]:
        return self._filenames(SyncOutcome.MISSING)

    @property
    def skipped(self) -> list[str]:
        return self._filenames(SyncOutcome.SKIPPED)


# ---------------------------------------------------------------------------
# Change detection
# ---------------------------------------------------------------------------

def _mtime_ms(st: os.stat_result) -> int:
    """Modification time in whole milliseconds, rounded half up."""
    return (st.st_mtime_ns + 500_000) // 1_000_000


def is_unchanged(old_path: str, new_path: str) -> bool:
    """Size + millisecond mtime heuristic; file content is never compared."""
    if not os.path.isfile(old_path) or not os.path.isfile(new_path):
        return False
    old_stat = os.stat(old_path)
    new_stat = os.stat(new_path)
    return old_stat.st_size == new_stat.st_size and _mtime_ms(old_stat) == _mtime_ms(new_stat)


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------

def sync_image_set(image_set_path: str, source_dir: str) -> ImageSetSyncResult:
    """Synchronize one .imageset / .appiconset from source_dir."""
    image_set = os.path.basename(image_set_path.rstrip(os.sep))
    contents = read_contents(image_set_path)
    result = ImageSetSyncResult()

    for image in contents.images:
        old_path = os.path.join(image_set_path, image.filename) if image.filename else None
        new_path = find_image_path(image_set_path, source_dir, image)

        if new_path is None:
            if image.filename is None:
                result.add(SyncOutcome.UNASSIGNED, None)
            else:
                result.add(SyncOutcome.MISSING, image.filename)
            continue

        new_name = os.path.basename(new_path)
        if old_path is None or os.path.basename(old_path) != new_name:
            if old_path is not None and os.path.isfile(old_path):
                try:
                    os.remove(old_path)
                except OSError as e:
                    raise FileOperationError(f"cannot delete {old_path}: {e}", image_set=image_set, path=old_path) from e
            image.filename = new_name
            result.manifest_updated = True
        elif is_unchanged(old_path, new_path):
            result.add(SyncOutcome.SKIPPED, image.filename)
            continue

        dst = os.path.join(image_set_path, new_name)
        try:
            shutil.copy2(new_path, dst)
        except OSError as e:
            raise FileOperationError(f"cannot copy {new_path} to {dst}: {e}", image_set=image_set, path=new_path) from e
        result.add(SyncOutcome.UPDATED, image.filename)

    if result.manifest_updated:
        write_contents(image_set_path, contents)

    return result
