"""
friendly_files.cli

Command-line front end over `friendly_files.file_helper`.

Provides:
 - One sub-command per helper operation (list, size, move, rename, ...)
 - Config-driven logging setup and defaults
 - Uniform exit codes: 0 success, 1 failure, 130 interrupted
 - Shell auto-completion via ``argcomplete``

Command results go to stdout; logs and progress bars go to stderr.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import argcomplete

from . import file_helper
from .base.fs import human_size
from .base.logging import get_logger, setup_logging
from .config import Settings, load_settings, resolve_config_path
from .errors import FriendlyFilesError
from .progress import Progress

log = get_logger(__name__)

LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

Handler = Callable[[argparse.Namespace, Settings], int]


# ----------------------------------------------------------------------
# COMMANDS
# ----------------------------------------------------------------------

def _cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    extension = args.ext if args.ext is not None else settings.extension
    count = 0
    for path in file_helper.iter_files(args.root, extension):
        print(path)
        count += 1
    log.debug("Listed %d file(s) under %s", count, args.root)
    return 0


def _cmd_size(args: argparse.Namespace, settings: Settings) -> int:
    size = file_helper.get_size(args.path)
    print(human_size(size) if args.human else size)
    return 0


def _cmd_move(args: argparse.Namespace, settings: Settings) -> int:
    print(file_helper.move(args.source, args.destination))
    return 0


def _cmd_rename(args: argparse.Namespace, settings: Settings) -> int:
    print(file_helper.rename(args.path, args.new_name))
    return 0


def _rename_many(files: List[Path], new_extension: str, dry_run: bool, show_progress: bool) -> int:
    progress = Progress(files, desc="Renaming", total=len(files), disable=not show_progress)
    for path in progress:
        if dry_run:
            target = file_helper.name_with_new_extension(path, new_extension)
            progress.write(f"[DRY-RUN] {path} → {target}")
            continue
        progress.write(str(file_helper.rename_extension(path, new_extension)))
    log.info("%s %d file(s)", "Would rename" if dry_run else "Renamed", len(files))
    return 0


def _cmd_rename_ext(args: argparse.Namespace, settings: Settings) -> int:
    target = Path(args.target)
    if target.is_dir():
        files = file_helper.list_files(target, args.match)
        return _rename_many(files, args.new_extension, args.dry_run, settings.progress and not args.no_progress)

    if args.dry_run:
        print(f"[DRY-RUN] {target} → {file_helper.name_with_new_extension(target, args.new_extension)}")
        return 0
    print(file_helper.rename_extension(target, args.new_extension))
    return 0


def _cmd_mkdir(args: argparse.Namespace, settings: Settings) -> int:
    created = file_helper.ensure_parent(args.path) if args.parent else file_helper.ensure_dir(args.path)
    print(created)
    return 0


def _cmd_delete(args: argparse.Namespace, settings: Settings) -> int:
    if args.dry_run:
        state = "exists" if file_helper.exists(args.path) else "missing"
        print(f"[DRY-RUN] Would delete {args.path} ({state})")
        return 0
    file_helper.delete_recursively(args.path)
    log.info("🗑️ Deleted %s", args.path)
    return 0


def _cmd_tempdir(args: argparse.Namespace, settings: Settings) -> int:
    print(file_helper.create_temp_dir(args.prefix or settings.temp_prefix))
    return 0


def _cmd_info(args: argparse.Namespace, settings: Settings) -> int:
    present = file_helper.exists(args.path)
    print(f"path: {args.path}")
    print(f"exists: {'yes' if present else 'no'}")
    print(f"name: {file_helper.name_without_extension(args.path)}")
    print(f"extension: {file_helper.get_extension(args.path)}")
    print(f"size: {file_helper.get_size(args.path) if present else 0}")
    return 0


# ----------------------------------------------------------------------
# PARSER
# ----------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="friendly-files",
        description="Convenience wrappers around common filesystem operations.",
    )
    parser.add_argument("--config", "-c", help="YAML configuration (defaults to ./configs/config.yaml if present).")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Override the configured logging verbosity.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p = sub.add_parser("list", help="List visible files under a directory, recursively.")
    p.add_argument("root", type=Path)
    p.add_argument("--ext", "-e", help="Keep only paths ending with this literal suffix (e.g. '.txt').")
    p.set_defaults(handler=_cmd_list)

    p = sub.add_parser("size", help="Print the byte size of a file or directory.")
    p.add_argument("path", type=Path)
    p.add_argument("--human", action="store_true", help="Print a human readable size.")
    p.set_defaults(handler=_cmd_size)

    p = sub.add_parser("move", help="Move a file or directory (never overwrites).")
    p.add_argument("source", type=Path)
    p.add_argument("destination", type=Path)
    p.set_defaults(handler=_cmd_move)

    p = sub.add_parser("rename", help="Rename an entry within its directory.")
    p.add_argument("path", type=Path)
    p.add_argument("new_name")
    p.set_defaults(handler=_cmd_rename)

    p = sub.add_parser("rename-ext", help="Change the extension of a file, or of every file under a directory.")
    p.add_argument("target", type=Path)
    p.add_argument("new_extension", help="New extension without the leading dot.")
    p.add_argument("--match", "-m", default="", help="Suffix filter applied when TARGET is a directory.")
    p.add_argument("--dry-run", action="store_true", help="Show the new names without renaming.")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")
    p.set_defaults(handler=_cmd_rename_ext)

    p = sub.add_parser("mkdir", help="Create a directory and any missing parents.")
    p.add_argument("path", type=Path)
    p.add_argument("--parent", action="store_true", help="Create the parent of PATH instead.")
    p.set_defaults(handler=_cmd_mkdir)

    p = sub.add_parser("delete", help="Delete a file or directory tree.")
    p.add_argument("path", type=Path)
    p.add_argument("--dry-run", action="store_true", help="Report without deleting.")
    p.set_defaults(handler=_cmd_delete)

    p = sub.add_parser("tempdir", help="Create a new temporary directory and print its path.")
    p.add_argument("--prefix", help="Directory name prefix (defaults to the configured temp_prefix).")
    p.set_defaults(handler=_cmd_tempdir)

    p = sub.add_parser("info", help="Show name parts, existence and size of a path.")
    p.add_argument("path", type=Path)
    p.set_defaults(handler=_cmd_info)

    return parser


# ----------------------------------------------------------------------
# ENTRY POINT
# ----------------------------------------------------------------------

def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = load_settings(resolve_config_path(args.config))
    except (OSError, ValueError) as exc:
        setup_logging(args.log_level)
        log.error("❌ Invalid configuration: %s", exc)
        return 1

    setup_logging(
        level=args.log_level or settings.level,
        use_rich=settings.use_rich,
        log_dir=settings.log_dir,
        file_prefix=settings.file_prefix,
    )
    log.debug("Arguments: %s", args)

    handler: Handler = args.handler
    try:
        return handler(args, settings)
    except KeyboardInterrupt:
        log.warning("⚠️ Operation cancelled by user.")
        return 130
    except FriendlyFilesError as exc:
        log.error("❌ %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
