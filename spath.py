#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import argparse
import os
from typing import List

from spath_context import SearchContext, LogLevel
from spath_errors import SearchPathError
from spath_logger import log_error, log_info
from spath_paths import FindKind, SearchPath, is_bare_name

DEFAULT_VAR = "PATH"


def _default_var() -> str:
    return os.getenv("SPATH_VAR") or DEFAULT_VAR


def build_search_context(args: argparse.Namespace) -> SearchContext:
    """Build a SearchContext from command-line arguments."""
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 3:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return SearchContext(
        log_rich_format=getattr(args, 'log', False),
        log_level=log_level,
    )


def build_search_path(context: SearchContext, args: argparse.Namespace) -> SearchPath:
    """
    Assemble the effective search path:

      1. --path if given, else the environment variable (--env, $SPATH_VAR, PATH)
      2. --prepend entries, in the order given, ahead of everything
      3. --append entries at the end
      4. --cwd puts '.' first
      5. --dedup drops later duplicates

    Raises VariableNotFound if the environment variable is not set.
    """
    if args.path is not None:
        sp = SearchPath.from_string(args.path, separator=args.separator, context=context)
    else:
        var_name = args.env or _default_var()
        sp = SearchPath.from_env(var_name, separator=args.separator, context=context)
    for root in reversed(args.prepend):
        sp.prepend(root)
    for root in args.append:
        sp.append(root)
    if args.cwd:
        sp.prepend_cwd()
    if args.dedup:
        sp.dedup()
    entries = ",".join(f"'{p}'" for p in sp)
    log_info(context, f"Search path: {entries or '<none>'}")
    return sp


def _load(args: argparse.Namespace):
    """Return (search_path, context), or (None, context) after reporting an error."""
    context = build_search_context(args)
    try:
        return build_search_path(context, args), context
    except SearchPathError as e:
        log_error(context, f"spath: {e.format()}")
        return None, context


def cmd_which(args: argparse.Namespace) -> int:
    sp, context = _load(args)
    if sp is None:
        return 2

    exit_code = 0
    for name in args.names:
        if args.name_only and not is_bare_name(name):
            hit = None
        else:
            hit = sp.find_file(name)
        if hit is None:
            log_error(context, f"spath: no '{name}' in search path")
            exit_code = 1
            continue
        print(hit)
    return exit_code


def cmd_find(args: argparse.Namespace) -> int:
    sp, context = _load(args)
    if sp is None:
        return 2

    hit = sp.find_kind(args.name, FindKind(args.kind))
    if hit is None:
        log_error(context, f"spath: no '{args.name}' ({args.kind}) in search path")
        return 1
    print(hit)
    return 0


def cmd_all(args: argparse.Namespace) -> int:
    sp, _ = _load(args)
    if sp is None:
        return 2

    hits = sp.find_all(args.name)
    for hit in hits:
        print(hit)
    return 0 if hits else 1


def cmd_list(args: argparse.Namespace) -> int:
    sp, _ = _load(args)
    if sp is None:
        return 2

    if args.joined:
        print(sp.join(args.separator))
        return 0
    for entry in sp:
        print(entry)
    return 0


def cmd_contains(args: argparse.Namespace) -> int:
    sp, _ = _load(args)
    if sp is None:
        return 2
    return 0 if sp.contains(args.directory) else 1


def main(argv: List[str] = None) -> None:
    parser = argparse.ArgumentParser(prog="spath", description="Find files and directories along a search path")
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vvv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-e", "--env",
        help="Environment variable holding the search path (default: $SPATH_VAR or PATH)",
    )
    source.add_argument(
        "-p", "--path",
        help="Search path given directly as a delimited string",
    )
    parser.add_argument(
        "--separator",
        help=f"Search path separator (default: '{os.pathsep}')",
    )
    parser.add_argument(
        "-P", "--prepend",
        action="append",
        default=[],
        help="Put a directory ahead of the search path (can be passed multiple times)",
    )
    parser.add_argument(
        "-A", "--append",
        action="append",
        default=[],
        help="Add a directory after the search path (can be passed multiple times)",
    )
    parser.add_argument("--cwd", action="store_true",
                        help="Search the current directory first")
    parser.add_argument("--dedup", action="store_true",
                        help="Drop duplicate directories, keeping the first occurrence")

    ###########################
    # which command
    ###########################
    p_which = subparsers.add_parser("which", help="Find the first regular file for each name")
    p_which.add_argument("--name-only", "-n", action="store_true",
                         help="Only search for bare names, not names with a directory part")
    p_which.add_argument("names", nargs="+", help="File names to look up")
    p_which.set_defaults(func=cmd_which)

    ###########################
    # find command
    ###########################
    p_find = subparsers.add_parser("find", help="Find the first file or directory")
    p_find.add_argument("--kind", "-k", choices=[k.value for k in FindKind], default=FindKind.ANY.value,
                        help="Kind of entry to accept (default: any)")
    p_find.add_argument("name", help="Name to look up")
    p_find.set_defaults(func=cmd_find)

    ###########################
    # all command
    ###########################
    p_all = subparsers.add_parser("all", help="List every match, in search order")
    p_all.add_argument("name", help="Name to look up")
    p_all.set_defaults(func=cmd_all)

    ###########################
    # list command
    ###########################
    p_list = subparsers.add_parser("list", help="Print the search path entries", aliases=["ls"])
    p_list.add_argument("--joined", "-j", action="store_true",
                        help="Print a single delimited line instead of one entry per line")
    p_list.set_defaults(func=cmd_list)

    ###########################
    # contains command
    ###########################
    p_contains = subparsers.add_parser("contains", help="Exit 0 if a directory is in the search path")
    p_contains.add_argument("directory", help="Directory entry to look for")
    p_contains.set_defaults(func=cmd_contains)

    args = parser.parse_args(argv)

    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
