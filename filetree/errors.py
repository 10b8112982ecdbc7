"""Exceptions raised by the file tree operations."""

import logging

logger = logging.getLogger(__name__)


class FileTreeError(Exception):
    """Base error with a message, optionally logged as a warning when raised."""
    def __init__(self, message="A file tree error occurred", log=False):
        self.message = message
        super().__init__(self.message)
        if log:
            logger.warning(message)


class PathNotFound(FileTreeError, LookupError):
    """A path segment does not name any node in its folder."""
    def __init__(self, path: str, segment: str, log=False):
        self.path = path
        self.segment = segment
        super().__init__(f"No node named {segment!r} while resolving {path!r}", log=log)


class NotAFolder(FileTreeError):
    """A path segment names a file where a folder was expected."""
    def __init__(self, path: str, segment: str, log=False):
        self.path = path
        self.segment = segment
        super().__init__(f"{segment!r} is not a folder (resolving {path!r})", log=log)


class DuplicateName(FileTreeError):
    def __init__(self, folder_path: str, name: str, log=False):
        self.folder_path = folder_path
        self.name = name
        where = folder_path or "the root"
        super().__init__(f"A node named {name!r} already exists in {where}", log=log)


__all__ = [
    "DuplicateName",
    "FileTreeError",
    "NotAFolder",
    "PathNotFound",
]
