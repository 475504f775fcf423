"""Logging options shared by search paths and the spath command."""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    SILENT = 0
    ERROR = 3       # spath default
    WARNING = 6     # library default
    INFO = 10       # hits and the effective search path (-v)
    DEBUG = 30      # misses and skipped directories (-vvv)


@dataclass
class SearchContext:
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'SearchContext':
        return SearchContext(log_level=LogLevel.WARNING)
