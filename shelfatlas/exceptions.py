"""Custom exceptions for atlas building"""

from typing import List, Tuple


class AtlasError(Exception):
    """Base exception for atlas errors"""
    pass


class ImageCollectionError(AtlasError):
    """Directory traversal errors (missing root, unreadable directory)"""
    pass


class NoImagesFoundError(AtlasError):
    """No supported image files to pack"""
    pass


class ImageLoadError(AtlasError):
    """One or more source images could not be opened or decoded"""

    def __init__(self, failures: List[Tuple[str, Exception]]):
        self.failures = list(failures)
        if len(self.failures) == 1:
            path, err = self.failures[0]
            message = f"failed to load image {path}: {err}"
        else:
            lines = [f"  {path}: {err}" for path, err in self.failures]
            message = f"failed to load {len(self.failures)} images:\n" + "\n".join(lines)
        super().__init__(message)


class AtlasWriteError(AtlasError):
    """Atlas could not be written (empty canvas, I/O failure)"""
    pass
