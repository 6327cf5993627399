"""
friendly_files.file_helper

Stateless convenience wrappers around the platform filesystem API.

Every call goes straight to ``os``/``shutil``/``tempfile`` and re-reads live
filesystem state; nothing is cached. Two error policies coexist:

 - strict: traversal, move, rename, directory creation and deletion wrap any
   ``OSError`` in :class:`IOFailure` and abort
 - lenient: :func:`get_size` counts unmeasurable files as zero bytes and
   :func:`exists` answers ``False`` instead of raising
"""

from __future__ import annotations

import errno
import os
import shutil
import stat
import sys
import tempfile
from functools import partial
from pathlib import Path
from typing import Any, Callable, Iterator, List, Optional, TypeVar, Union

from .base.fs import PathLike, as_path
from .base.logging import get_logger
from .errors import IOFailure

log = get_logger(__name__)

T = TypeVar("T")

DEFAULT_TEMP_PREFIX = "friendly-files-"

_REMOVAL_FUNCS = (os.unlink, os.remove, os.rmdir)


# ----------------------------------------------------------------------
# INTERNAL HELPERS
# ----------------------------------------------------------------------

def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".") or str(path).startswith(".")


def result_or_default(func: Callable[[], T], default: T) -> T:
    """Return ``func()``, or ``default`` when it raises ``OSError``."""
    try:
        return func()
    except OSError as exc:
        log.debug("Using fallback %r: %s", default, exc)
        return default


def _raise_for(operation: str, root: Path) -> Callable[[OSError], None]:
    def _raise(exc: OSError) -> None:
        raise IOFailure(operation, exc.filename or root, exc) from exc

    return _raise


def _skip_unreadable(exc: OSError) -> None:
    log.debug("Skipping unreadable entry %s: %s", exc.filename, exc)


def _walk_files(root: Path, on_error: Callable[[OSError], None]) -> Iterator[Path]:
    """Yield regular files under ``root`` depth-first, in name order per directory."""
    if os.path.isfile(root):
        yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        base = Path(dirpath)
        for name in sorted(filenames):
            candidate = base / name
            if os.path.isfile(candidate):
                yield candidate


def _visible_files(root: Path, on_error: Callable[[OSError], None]) -> Iterator[Path]:
    return (path for path in _walk_files(root, on_error) if not _is_hidden(path))


def _file_size(path: Path) -> int:
    return result_or_default(partial(os.path.getsize, path), 0)


def _chmod_owner_rwx(path: PathLike) -> None:
    if os.path.islink(path):
        return
    try:
        mode = stat.S_IMODE(os.lstat(path).st_mode)
        os.chmod(path, mode | stat.S_IRWXU)
    except OSError as exc:
        # The removal that follows reports the real failure.
        log.debug("Could not relax permissions on %s: %s", path, exc)


def _grant_owner_access(root: Path) -> None:
    _chmod_owner_rwx(root)
    for dirpath, dirnames, _ in os.walk(root):
        for name in dirnames:
            _chmod_owner_rwx(os.path.join(dirpath, name))


def _retry_removal(root: str, func: Callable[..., Any], path: str, failure: Any) -> None:
    exc = failure[1] if isinstance(failure, tuple) else failure
    if func not in _REMOVAL_FUNCS:
        raise exc
    # Permissions above the target tree are left alone.
    if os.path.normpath(path) != root:
        _chmod_owner_rwx(os.path.dirname(path) or os.curdir)
    _chmod_owner_rwx(path)
    func(path)


def _remove_tree(root: Path) -> None:
    _grant_owner_access(root)
    retry = partial(_retry_removal, os.path.normpath(root))
    if sys.version_info >= (3, 12):
        shutil.rmtree(root, onexc=retry)
    else:
        shutil.rmtree(root, onerror=retry)


def _remove_entry(path: Path) -> None:
    try:
        os.unlink(path)
    except PermissionError:
        _chmod_owner_rwx(path)
        os.unlink(path)


# ----------------------------------------------------------------------
# LISTING
# ----------------------------------------------------------------------

def iter_files(root: PathLike, extension: Optional[str] = "") -> Iterator[Path]:
    """
    Lazily yield every visible regular file under ``root``, recursively.

    Files whose name starts with ``.`` are skipped, as is anything whose full
    path string starts with ``.``; hidden directories are still descended.
    When ``extension`` is not blank only paths whose string form ends with it
    are kept. The test is a raw suffix match, so pass ``".txt"`` rather than
    ``"txt"`` to avoid matching ``footxt``. Paths are built with ``pathlib``,
    which drops a leading ``./``, so ``"."`` and ``"./sub"`` roots list their
    visible files instead of being treated as hidden.

    Raises:
        IOFailure: On the first traversal error (missing root, unreadable
            directory). Iteration stops there.
    """
    root_path = as_path(root)
    keep_all = _is_blank(extension)
    for path in _visible_files(root_path, _raise_for("list_files", root_path)):
        if keep_all or str(path).endswith(extension):  # type: ignore[arg-type]
            yield path


def list_files(root: PathLike, extension: Optional[str] = "") -> List[Path]:
    """Eager form of :func:`iter_files`; errors surface at call time."""
    return list(iter_files(root, extension))


# ----------------------------------------------------------------------
# MOVE / RENAME
# ----------------------------------------------------------------------

def move(source: PathLike, destination: PathLike) -> Path:
    """
    Move a file or directory tree to ``destination`` and return that path.

    An existing destination is never overwritten or merged into.
    """
    src, dst = as_path(source), as_path(destination)
    if os.path.lexists(dst):
        raise IOFailure(
            "move",
            src,
            FileExistsError(errno.EEXIST, "Destination exists", str(dst)),
        )
    try:
        shutil.move(os.fspath(src), os.fspath(dst))
    except OSError as exc:
        raise IOFailure("move", src, exc) from exc
    log.debug("Moved %s → %s", src, dst)
    return dst


def rename(path: PathLike, new_name: str) -> Path:
    """Move ``path`` to ``new_name`` inside the same parent directory."""
    source = as_path(path)
    return move(source, source.parent / new_name)


def rename_extension(path: PathLike, new_extension: str) -> Path:
    """Swap the last extension of ``path`` for ``new_extension`` on disk."""
    source = as_path(path)
    return rename(source, f"{name_without_extension(source)}.{new_extension}")


def name_with_new_extension(name_or_path: PathLike, new_extension: str) -> Union[str, Path]:
    """
    Preview the name :func:`rename_extension` would produce, without touching disk.

    A ``str`` argument yields the bare file name (leading directories are
    dropped); a path object yields the sibling ``Path``.
    """
    new_name = f"{name_without_extension(name_or_path)}.{new_extension}"
    if isinstance(name_or_path, str):
        return new_name
    return as_path(name_or_path).parent / new_name


# ----------------------------------------------------------------------
# NAME PARTS
# ----------------------------------------------------------------------

def get_extension(path: PathLike) -> str:
    """Text after the last ``.`` of the file name, or ``""`` without a dot."""
    _, dot, extension = as_path(path).name.rpartition(".")
    return extension if dot else ""


def name_without_extension(path: PathLike) -> str:
    name = as_path(path).name
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


# ----------------------------------------------------------------------
# QUERIES
# ----------------------------------------------------------------------

def get_size(path: PathLike) -> int:
    """
    Byte size of a file, or the total of all visible files under a directory.

    Never raises. Files that vanish or cannot be measured mid-walk, unreadable
    directories and a missing ``path`` all contribute zero.
    """
    target = as_path(path)
    if os.path.isfile(target):
        return _file_size(target)
    return sum(_file_size(file) for file in _visible_files(target, _skip_unreadable))


def exists(path: PathLike) -> bool:
    return os.path.exists(path)


# ----------------------------------------------------------------------
# CREATION / DELETION
# ----------------------------------------------------------------------

def create_temp_dir(prefix: str = DEFAULT_TEMP_PREFIX) -> Path:
    """
    Create a fresh empty directory in the system temp area.

    The caller owns the directory; nothing removes it automatically.
    """
    try:
        created = Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as exc:
        raise IOFailure("create_temp_dir", tempfile.gettempdir(), exc) from exc
    log.debug("Created temp directory %s", created)
    return created


def ensure_dir(path: PathLike) -> Path:
    """Create ``path`` and any missing parents; succeed if it already exists."""
    directory = as_path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IOFailure("ensure_dir", directory, exc) from exc
    return directory


def ensure_parent(path: PathLike) -> Path:
    return ensure_dir(as_path(path).parent)


def delete_recursively(path: PathLike) -> None:
    """
    Remove a file, a symlink (never followed) or a whole directory tree.

    Missing paths are ignored. Permission bits inside the tree do not block
    removal: directories are opened up for the owner first and refused
    removals are retried once after making the entry writable.

    Raises:
        IOFailure: If anything is left that still cannot be removed.
    """
    target = as_path(path)
    if not os.path.lexists(target):
        log.debug("Nothing to delete at %s", target)
        return
    try:
        if os.path.isdir(target) and not os.path.islink(target):
            _remove_tree(target)
        else:
            _remove_entry(target)
    except OSError as exc:
        raise IOFailure("delete", target, exc) from exc
    log.debug("Deleted %s", target)
