"""
friendly-files: convenience wrappers around common filesystem operations.

Modules:
  file_helper : listing, move/rename, size, directory creation, deletion
  errors      : FriendlyFilesError and IOFailure
  config      : YAML settings loader
  progress    : tqdm progress bars for batch operations
  cli         : `friendly-files` command line
  base        : logging, YAML reading and small path helpers
"""

from .errors import FriendlyFilesError, IOFailure
from .file_helper import (
    DEFAULT_TEMP_PREFIX,
    create_temp_dir,
    delete_recursively,
    ensure_dir,
    ensure_parent,
    exists,
    get_extension,
    get_size,
    iter_files,
    list_files,
    move,
    name_with_new_extension,
    name_without_extension,
    rename,
    rename_extension,
    result_or_default,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_TEMP_PREFIX",
    "FriendlyFilesError",
    "IOFailure",
    "create_temp_dir",
    "delete_recursively",
    "ensure_dir",
    "ensure_parent",
    "exists",
    "get_extension",
    "get_size",
    "iter_files",
    "list_files",
    "move",
    "name_with_new_extension",
    "name_without_extension",
    "rename",
    "rename_extension",
    "result_or_default",
]
