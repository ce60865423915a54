"""
Fatal error types.

Unresolvable images are not errors (they are reported as unassigned or
missing); everything here aborts the run.
"""


class SyncError(Exception):
    """Base class; carries the image set and file the failure is about."""
    def __init__(self, message: str, image_set: str | None = None, path: str | None = None):
        super().__init__(message)
        self.image_set = image_set
        self.path = path


class ManifestError(SyncError):
    """Contents.json is missing, unreadable, not JSON, or has the wrong shape."""


class FileOperationError(SyncError):
    """Copying, deleting or writing a file inside an image set failed."""
