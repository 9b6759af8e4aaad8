"""Exceptions raised while building a map from OSM text."""
from typing import Optional


class BuildMapError(Exception):
    """Base class for conversion failures."""


class FatalParseError(BuildMapError):
    """Malformed input that aborts the whole run.

    Carries the pass number and the 1-based input line where the problem
    was found so the message points at the offending record.
    """

    def __init__(self, message: str, line_no: Optional[int] = None,
                 pass_no: Optional[int] = None):
        self.reason = message
        self.line_no = line_no
        self.pass_no = pass_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
            if pass_no is not None:
                message = f"pass {pass_no}, {message}"
        super().__init__(message)


class InputReadError(BuildMapError):
    """The input could not be read (I/O failure or undecodable bytes)."""


class RuleTableError(BuildMapError, ValueError):
    """A classification rule table is inconsistent or cannot be loaded."""
