"""Stderr logging gated by a SearchContext's log level."""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time

from spath_context import SearchContext, LogLevel


def log(context: SearchContext, log_level: LogLevel, message: str) -> None:
    """
    Print `message` to stderr if `context.log_level` admits `log_level`.
    A None context behaves like SearchContext.default().
    """
    if context is None:
        context = SearchContext.default()
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)

def log_error(context: SearchContext, message: str) -> None:
    log(context, LogLevel.ERROR, message)

def log_info(context: SearchContext, message: str) -> None:
    log(context, LogLevel.INFO, message)


def log_debug(context: SearchContext, message: str) -> None:
    log(context, LogLevel.DEBUG, message)
