#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from spath_context import SearchContext
from spath_errors import VariableNotFound
from spath_logger import log_debug, log_info

# ';' on Windows, ':' elsewhere.
PATH_SEPARATOR = os.pathsep

CURRENT_DIR_PATH = "."

PathLike = Union[str, os.PathLike]


class FindKind(Enum):
    ANY = "any"
    FILE = "file"
    DIRECTORY = "dir"


def split_search_path(value: str, separator: Optional[str] = None) -> List[str]:
    """
    Split a delimited search path string like '/usr/bin:/bin'.

    Empty and whitespace-only components are dropped, all others are kept as-is.
    """
    sep = separator or PATH_SEPARATOR
    return [p for p in value.split(sep) if p.strip()]


def is_bare_name(file_name: PathLike) -> bool:
    """True for 'ls', False for 'bin/ls', '/bin/ls', '.', '..' and ''."""
    name = os.fspath(file_name)
    if name in ("", os.curdir, os.pardir):
        return False
    head, tail = os.path.split(name)
    return head == "" and tail == name


@dataclass
class SearchPath:
    """
    An ordered list of directories used to find file system entries.

    Lookups probe `directory/name` for each directory in order and the first
    match wins. Directories are not validated when added; a directory that is
    missing or unreadable at lookup time simply has no match.

    Entries are stored exactly as given ('./bin' stays './bin') and compared
    as strings. Duplicates are kept until dedup() is called.
    """
    paths: List[str] = field(default_factory=list)
    context: Optional[SearchContext] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.paths, (str, bytes)):
            raise TypeError("paths must be a list of directories; use SearchPath.from_string() to split a string")
        self.paths = [os.fspath(p) for p in self.paths]
        if self.context is None:
            self.context = SearchContext.default()

    # --- Construction ---

    @classmethod
    def empty(cls, context: Optional[SearchContext] = None) -> "SearchPath":
        return cls(context=context)

    @classmethod
    def from_paths(cls, paths: Iterable[PathLike], context: Optional[SearchContext] = None) -> "SearchPath":
        """Each element is one directory, no splitting is performed."""
        return cls(paths=list(paths), context=context)

    @classmethod
    def from_string(
        cls,
        value: str,
        separator: Optional[str] = None,
        context: Optional[SearchContext] = None,
    ) -> "SearchPath":
        return cls(paths=split_search_path(value, separator), context=context)

    @classmethod
    def from_env(
        cls,
        var_name: str,
        separator: Optional[str] = None,
        context: Optional[SearchContext] = None,
    ) -> "SearchPath":
        """
        Build a search path from the environment variable `var_name`.

        Raises VariableNotFound if the variable is not set.
        """
        value = os.environ.get(var_name)
        if value is None:
            raise VariableNotFound(var_name)
        search_path = cls.from_string(value, separator=separator, context=context)
        log_info(search_path.context, f"Search path from ${var_name}: {len(search_path)} entries")
        return search_path

    @classmethod
    def from_env_or(
        cls,
        var_name: str,
        default: Union["SearchPath", PathLike, Iterable[PathLike]],
        separator: Optional[str] = None,
        context: Optional[SearchContext] = None,
    ) -> "SearchPath":
        """Like from_env(), but falls back to `default` when the variable is not set."""
        try:
            return cls.from_env(var_name, separator=separator, context=context)
        except VariableNotFound:
            log_debug(context, f"${var_name} is not set, using default search path")
            return cls.coerce(default, separator=separator, context=context)

    @classmethod
    def from_env_or_empty(
        cls,
        var_name: str,
        separator: Optional[str] = None,
        context: Optional[SearchContext] = None,
    ) -> "SearchPath":
        return cls.from_env_or(var_name, cls.empty(), separator=separator, context=context)

    @classmethod
    def coerce(
        cls,
        value: Union["SearchPath", PathLike, Iterable[PathLike]],
        separator: Optional[str] = None,
        context: Optional[SearchContext] = None,
    ) -> "SearchPath":
        """
        Convert `value` into a SearchPath:

          - a SearchPath is copied
          - a str is split on the separator
          - a single path object becomes a one-entry search path
          - any other iterable of str/path objects is taken verbatim
        """
        if isinstance(value, SearchPath):
            return cls(paths=list(value.paths), context=context or value.context)
        if isinstance(value, str):
            return cls.from_string(value, separator=separator, context=context)
        if isinstance(value, os.PathLike):
            return cls(paths=[value], context=context)
        try:
            items = list(value)
        except TypeError:
            raise TypeError(f"cannot build a SearchPath from {type(value).__name__}") from None
        for item in items:
            if not isinstance(item, (str, os.PathLike)):
                raise TypeError(f"search path entries must be str or path objects, got {type(item).__name__}")
        return cls.from_paths(items, context=context)

    # --- Lookup ---

    def find(self, file_name: PathLike) -> Optional[str]:
        """Return the first file or directory named `file_name`, or None."""
        return self._find_first(file_name, FindKind.ANY)

    def find_file(self, file_name: PathLike) -> Optional[str]:
        """Return the first regular file named `file_name`, or None."""
        return self._find_first(file_name, FindKind.FILE)

    def find_directory(self, file_name: PathLike) -> Optional[str]:
        """Return the first directory named `file_name`, or None."""
        return self._find_first(file_name, FindKind.DIRECTORY)

    def find_kind(self, file_name: PathLike, kind: FindKind) -> Optional[str]:
        return self._find_first(file_name, kind)

    def find_if_name_only(self, file_name: PathLike) -> Optional[str]:
        """
        Like find(), but only for a bare name: 'ls' is searched for,
        'bin/ls' is not and yields None.
        """
        if not is_bare_name(file_name):
            return None
        return self.find(file_name)

    def find_all(self, file_name: PathLike) -> List[str]:
        """Return every existing `directory/file_name`, in search order."""
        results: List[str] = []
        for root in self.paths:
            candidate = os.path.join(root, file_name)
            if self._probe(candidate, FindKind.ANY):
                results.append(candidate)
        return results

    def _find_first(self, file_name: PathLike, kind: FindKind) -> Optional[str]:
        for root in self.paths:
            candidate = os.path.join(root, file_name)
            if self._probe(candidate, kind):
                log_info(self.context, f"Found '{file_name}' in '{root}'")
                return candidate
        log_debug(self.context, f"'{file_name}' not found ({kind.value}) in {len(self.paths)} directories")
        return None

    def _probe(self, candidate: str, kind: FindKind) -> bool:
        # A failing directory counts as "no match" and must not stop the scan.
        try:
            mode = Path(candidate).stat().st_mode
        except (FileNotFoundError, NotADirectoryError):
            return False
        except (OSError, ValueError) as e:
            log_debug(self.context, f"Skipping '{candidate}': {e}")
            return False
        if kind is FindKind.FILE:
            return stat.S_ISREG(mode)
        if kind is FindKind.DIRECTORY:
            return stat.S_ISDIR(mode)
        return True

    # --- Queries ---

    def contains(self, path: PathLike) -> bool:
        return os.fspath(path) in self.paths

    def contains_cwd(self) -> bool:
        return self.contains(CURRENT_DIR_PATH)

    def is_empty(self) -> bool:
        return not self.paths

    def to_list(self) -> List[str]:
        return list(self.paths)

    def join(self, separator: Optional[str] = None) -> str:
        """Render the search path as a delimited string, e.g. for an environment variable."""
        return (separator or PATH_SEPARATOR).join(self.paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.contains(path)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.paths))

    def __len__(self) -> int:
        return len(self.paths)

    def __str__(self) -> str:
        return self.join()

    # --- Mutation ---

    def append(self, path: PathLike) -> None:
        self.paths.append(os.fspath(path))

    def append_cwd(self) -> None:
        self.append(CURRENT_DIR_PATH)

    def prepend(self, path: PathLike) -> None:
        self.paths.insert(0, os.fspath(path))

    def prepend_cwd(self) -> None:
        self.prepend(CURRENT_DIR_PATH)

    def remove(self, path: PathLike) -> None:
        """Remove every occurrence of `path`; does nothing if it is absent."""
        target = os.fspath(path)
        self.paths = [p for p in self.paths if p != target]

    def dedup(self) -> None:
        """Drop later duplicates, keeping each first occurrence in place."""
        seen = set()
        unique: List[str] = []
        for p in self.paths:
            if p not in seen:
                seen.add(p)
                unique.append(p)
        self.paths = unique

    def clear(self) -> None:
        self.paths.clear()
