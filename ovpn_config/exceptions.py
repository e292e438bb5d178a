"""
Exceptions raised by the OpenVPN config parser.

Unknown commands and short argument lists are *not* errors; they are
collected as :class:`~ovpn_config.models.ParseWarning` lines.  Only a failure
to read the input stops a parse.
"""
from __future__ import annotations


class ConfigReadError(Exception):
    """
    The config input could not be read.

    Wraps the underlying :class:`OSError` or :class:`UnicodeDecodeError`
    (available as ``__cause__``).  ``line_number`` is the 1-based line being
    read when the failure happened, or 0 if the source could not be opened.
    """

    def __init__(self, message: str, source: str = "<stream>", line_number: int = 0) -> None:
        super().__init__(message)
        self.source = source
        self.line_number = line_number

    def __str__(self) -> str:
        where = f"{self.source}:{self.line_number}" if self.line_number else self.source
        return f"{where}: {self.args[0]}"
