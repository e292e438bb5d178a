"""
InlineBlockAccumulator
======================

Collects the lines of a ``<name>`` … ``</name>`` inline file block.

States::

    closed ──open()──▶ open(start_line, name, lines) ──close()──▶ closed
                          │   ▲
                          └───┘ append(line)

:meth:`close` joins the collected lines with ``\\n`` and returns them; the
caller turns them into a directive reported at the start-marker line.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class OpenBlock:
    start_line: int
    identifier: str
    lines: List[str] = field(default_factory=list)


class InlineBlockAccumulator:
    """Holds at most one open inline block."""

    def __init__(self) -> None:
        self._block: Optional[OpenBlock] = None

    @property
    def is_open(self) -> bool:
        return self._block is not None

    @property
    def identifier(self) -> Optional[str]:
        """Name of the open block, or ``None``."""
        return self._block.identifier if self._block else None

    @property
    def start_line(self) -> Optional[int]:
        return self._block.start_line if self._block else None

    def open(self, identifier: str, start_line: int) -> None:
        if self._block is not None:
            raise RuntimeError(
                f"Inline block <{self._block.identifier}> opened at line "
                f"{self._block.start_line} is still open"
            )
        self._block = OpenBlock(start_line=start_line, identifier=identifier)

    def append(self, line: str) -> None:
        if self._block is None:
            raise RuntimeError("No inline block is open")
        self._block.lines.append(line)

    def close(self) -> Tuple[int, str, str]:
        """
        Finish the open block.

        Returns
        -------
        Tuple[int, str, str]
            ``(start_line, identifier, contents)``
        """
        if self._block is None:
            raise RuntimeError("No inline block is open")
        block, self._block = self._block, None
        return block.start_line, block.identifier, "\n".join(block.lines)

    def discard(self) -> Optional[OpenBlock]:
        """Drop the open block (if any) and return it."""
        block, self._block = self._block, None
        return block
