#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# spath_errors.py
from __future__ import annotations


class SearchPathError(Exception):
    """
    Base class for failures of search path operations.
    Lookups that find nothing are not failures and never raise.
    """

    code = "SP-9999"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def format(self) -> str:
        return f"[{self.code}] {self.message}"


class VariableNotFound(SearchPathError, LookupError):
    """The environment variable a search path was built from is not set."""

    code = "SP-0010"

    def __init__(self, var_name: str):
        super().__init__(f"environment variable '{var_name}' is not set")
        self.var_name = var_name
