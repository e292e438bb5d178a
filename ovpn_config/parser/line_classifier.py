"""
LineClassifier
==============

Decides what a single raw config line is.  Classification order:

+---+-----------------------------------------------------+-----------------+
| # | Condition                                           | Kind            |
+===+=====================================================+=================+
| 1 | A block is open and the line is ``</open-name>``    | BLOCK_END       |
+---+-----------------------------------------------------+-----------------+
| 2 | A block is open                                     | BLOCK_CONTENT   |
+---+-----------------------------------------------------+-----------------+
| 3 | Line is ``<name>`` and *name* accepts inline files  | BLOCK_START     |
+---+-----------------------------------------------------+-----------------+
| 4 | Trimmed line is empty or starts with ``#``          | SKIP            |
+---+-----------------------------------------------------+-----------------+
| 5 | Anything else                                       | COMMAND         |
+---+-----------------------------------------------------+-----------------+

Marker lines must start in column 1; an indented ``<ca>`` is read as a
command named ``<ca>`` (and reported as unknown).  For commands, everything
from the first ``#`` onward is discarded, then the rest is split on runs of
whitespace.  There is no quoting: a ``#`` inside an argument starts a comment.
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from ..directives import INLINE_FILE_COMMANDS

_COMMENT_RE = re.compile(r"#.*$")
_BLOCK_START_RE = re.compile(r"^<([A-Za-z0-9_-]+)>\s*$")
_BLOCK_END_RE = re.compile(r"^</([A-Za-z0-9_-]+)>\s*$")


class LineKind(enum.Enum):
    SKIP = "skip"
    BLOCK_START = "block_start"
    BLOCK_CONTENT = "block_content"
    BLOCK_END = "block_end"
    COMMAND = "command"


@dataclass(frozen=True)
class ClassifiedLine:
    """Result of classifying one line."""

    kind: LineKind
    text: str
    name: Optional[str] = None          # command name or block identifier
    args: Tuple[str, ...] = ()

    def __repr__(self) -> str:
        return f"ClassifiedLine(kind={self.kind.value!r}, name={self.name!r}, args={self.args})"


class LineClassifier:
    """
    Stateless classifier.  The caller passes the identifier of the currently
    open inline block (if any), which the classifier needs for rules 1 and 2.

    Parameters
    ----------
    inline_commands:
        Names accepted as ``<name>`` block markers.  Defaults to
        :data:`~ovpn_config.directives.INLINE_FILE_COMMANDS`.
    """

    def __init__(self, inline_commands: Optional[FrozenSet[str]] = None) -> None:
        self._inline_commands: FrozenSet[str] = (
            frozenset(inline_commands) if inline_commands is not None else INLINE_FILE_COMMANDS
        )

    def classify(self, line: str, open_block: Optional[str] = None) -> ClassifiedLine:
        """
        Classify *line* (newline already removed).

        Parameters
        ----------
        line:
            One raw source line.
        open_block:
            Identifier of the inline block currently being accumulated, or
            ``None`` when no block is open.

        Returns
        -------
        ClassifiedLine
        """
        if open_block is not None:
            end = _BLOCK_END_RE.match(line)
            if end and end.group(1) == open_block:
                return ClassifiedLine(LineKind.BLOCK_END, line, name=open_block)
            return ClassifiedLine(LineKind.BLOCK_CONTENT, line, name=open_block)

        start = _BLOCK_START_RE.match(line)
        if start and start.group(1) in self._inline_commands:
            return ClassifiedLine(LineKind.BLOCK_START, line, name=start.group(1))

        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            return ClassifiedLine(LineKind.SKIP, line)

        tokens = self.tokenize(line)
        return ClassifiedLine(LineKind.COMMAND, line, name=tokens[0], args=tuple(tokens[1:]))

    @staticmethod
    def tokenize(line: str) -> List[str]:
        """Drop a trailing ``#`` comment and split on whitespace."""
        return _COMMENT_RE.sub("", line).split()
