"""
Exception types raised by the FARS Toolbox.

Missing files are reported with the built-in ``FileNotFoundError``; the
classes here cover problems with the *contents* of a file or with the
arguments a caller passes in.
"""

from __future__ import annotations

from typing import Any, Iterable


class FarsError(Exception):
    """Base class for all toolbox errors."""


class MissingColumnsError(FarsError, ValueError):
    """A loaded accident file lacks one or more required columns."""

    def __init__(self, filename: Any, missing: Iterable[str]):
        self.filename = str(filename)
        self.missing = list(missing)
        super().__init__(
            f"file '{self.filename}' is missing required column(s): "
            f"{', '.join(self.missing)}"
        )


class InvalidStateError(FarsError, ValueError):
    """The requested STATE code does not occur in the loaded year."""

    def __init__(self, state_num: Any):
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")
