"""
ConfigRenderer
==============

Renders a :class:`~ovpn_config.models.ParsedConfigFile` in the output formats
offered by the CLI:

* ``config`` – normalised OpenVPN config text (one directive per line, inline
  files as ``<name>`` blocks, comments and blank lines dropped).  Parsing the
  result again yields the same directives.
* ``json``   – directives and warnings with their line numbers.
* ``text``   – a human-readable listing.
"""
from __future__ import annotations

import json
from typing import Iterable, List

from ..models import Directive, ParsedConfigFile


class ConfigRenderer:
    """Stateless renderer for parse results."""

    # ------------------------------------------------------------------
    # Config text
    # ------------------------------------------------------------------

    def to_config(self, directives: Iterable[Directive]) -> str:
        """Render *directives* as config-file text."""
        lines = [directive.to_line() for directive in directives]
        return "\n".join(lines) + "\n" if lines else ""

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def to_json(self, parsed: ParsedConfigFile) -> dict:
        return parsed.to_dict()

    def to_json_str(self, parsed: ParsedConfigFile, indent: int = 2) -> str:
        """Return *parsed* serialised to a JSON string."""
        return json.dumps(self.to_json(parsed), indent=indent)

    # ------------------------------------------------------------------
    # Text listing
    # ------------------------------------------------------------------

    def to_text(self, parsed: ParsedConfigFile, source_name: str = "") -> str:
        lines: List[str] = []
        if source_name:
            lines.append(f"{'═' * 60}\n  File: {source_name}\n{'═' * 60}")

        lines.append(f"  DIRECTIVES ({len(parsed.success_lines)})")
        for line in parsed.success_lines:
            directive = line.result
            inline = directive.inline_file
            if inline is not None:
                summary = f"<inline, {len(inline.contents.splitlines())} line(s)>"
            else:
                summary = " ".join(directive.to_args())
            lines.append(f"  {line.number:>5}  {directive.command:<28} {summary}".rstrip())

        if parsed.warning_lines:
            lines.append(f"\n  WARNINGS ({len(parsed.warning_lines)})")
            for line in parsed.warning_lines:
                lines.append(f"  {line.number:>5}  {line.result}")

        return "\n".join(lines)
