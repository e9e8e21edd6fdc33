import logging
import os
from typing import Iterable

from core.errors import DirectoryAccessError, InvalidRootPathError
from core.models import FileDescriptor

logger = logging.getLogger(__name__)

def check_root(root: str) -> str:
    """Return the absolute root, raising InvalidRootPathError if it is not a directory."""
    full = os.path.abspath(root)
    if not os.path.isdir(full):
        reason = "not a directory" if os.path.exists(full) else "no such directory"
        raise InvalidRootPathError(full, reason)
    return full

def describe_file(path: str) -> FileDescriptor:
    full = os.path.abspath(path)
    st = os.stat(full)
    name = os.path.basename(full)
    ext = os.path.splitext(name)[1].lower()
    return FileDescriptor(name=name, full_path=full, size_bytes=st.st_size, extension=ext)

def _scan_dir(path: str) -> tuple[list[FileDescriptor], list[str]]:
    files, subdirs = [], []
    with os.scandir(path) as it:
        for entry in it:
            try:
                # symlinked directories are listed but never descended
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file():
                    files.append(describe_file(entry.path))
            except OSError as e:
                # entry vanished or unreadable; its siblings are still indexed
                logger.warning("Error accessing %s: %s", entry.path, e.strerror or str(e))
    return files, subdirs

def iter_files(root: str) -> Iterable[FileDescriptor]:
    """Depth-first walk driven by an explicit stack of pending directories.

    A directory that cannot be scanned is logged and skipped together with
    its subtree; the rest of the stack is still processed.
    """
    pending = [os.path.abspath(root)]
    while pending:
        current = pending.pop()
        try:
            files, subdirs = _scan_dir(current)
        except OSError as e:
            logger.warning("%s", DirectoryAccessError(current, e.strerror or str(e)))
            continue
        yield from files
        pending.extend(subdirs)

def enumerate_files(root: str) -> list[FileDescriptor]:
    return list(iter_files(root))
