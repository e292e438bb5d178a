"""
OpenVpnConfigParser
===================

Top-level driver.  Reads a config source line by line and combines:

1. :class:`~ovpn_config.parser.line_classifier.LineClassifier`
   – skip / block marker / block content / command.
2. :class:`~ovpn_config.parser.inline_block.InlineBlockAccumulator`
   – collects ``<name>`` … ``</name>`` contents.
3. :class:`~ovpn_config.parser.dispatcher.DirectiveDispatcher`
   – builds the typed directive or a warning.

Results are collected into a :class:`~ovpn_config.models.ParsedConfigFile`.
Line numbers are 1-based; an inline block is reported at its ``<name>`` line.

Only read failures are fatal (:class:`~ovpn_config.exceptions.ConfigReadError`).
Unknown commands, short argument lists and inline blocks that are never
closed become warning lines and parsing carries on.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, Tuple, Union

from ..exceptions import ConfigReadError
from ..models import ConfigLine, Directive, ParsedConfigFile, ParseWarning
from ..parser.dispatcher import DirectiveDispatcher, DispatchResult
from ..parser.inline_block import InlineBlockAccumulator
from ..parser.line_classifier import LineClassifier, LineKind

logger = logging.getLogger(__name__)

ConfigSource = Union[IO[str], IO[bytes], Iterable[str], Iterable[bytes]]


class OpenVpnConfigParser:
    """
    Parses OpenVPN configuration text into directives.

    Parameters
    ----------
    encoding:
        Used to decode binary streams and files opened by :meth:`parse_file`.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._classifier = LineClassifier()
        self._dispatcher = DirectiveDispatcher()

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def parse(self, source: ConfigSource, source_name: str = "<stream>") -> ParsedConfigFile:
        """
        Parse a config from an open stream or any iterable of lines.

        Parameters
        ----------
        source:
            Text stream, binary stream, or iterable of ``str`` / ``bytes``
            lines.  Line terminators (``\\n`` or ``\\r\\n``) are stripped.
            The caller keeps ownership of the stream.
        source_name:
            Used in log messages and :class:`ConfigReadError`.

        Returns
        -------
        ParsedConfigFile
        """
        if isinstance(source, (str, bytes)):
            raise TypeError("parse() expects a stream or iterable of lines; use parse_text() for a string")

        result = ParsedConfigFile()
        block = InlineBlockAccumulator()

        for line_no, line in self._read_lines(source, source_name):
            classified = self._classifier.classify(line, block.identifier)
            kind = classified.kind

            if kind is LineKind.SKIP:
                continue
            if kind is LineKind.BLOCK_START:
                block.open(classified.name, line_no)
            elif kind is LineKind.BLOCK_CONTENT:
                block.append(line)
            elif kind is LineKind.BLOCK_END:
                start_line, identifier, contents = block.close()
                self._record(result, start_line, self._dispatcher.dispatch_inline(identifier, contents))
            else:
                self._record(
                    result, line_no, self._dispatcher.dispatch(classified.name, classified.args)
                )

        unterminated = block.discard()
        if unterminated is not None:
            logger.warning(
                "%s:%d: inline block <%s> is never closed; %d line(s) discarded",
                source_name, unterminated.start_line, unterminated.identifier,
                len(unterminated.lines),
            )
            result.warning_lines.append(
                ConfigLine(unterminated.start_line, ParseWarning.UNTERMINATED_INLINE_BLOCK)
            )

        logger.info(
            "Parsed %s: %d directive(s), %d warning(s)",
            source_name, len(result.success_lines), len(result.warning_lines),
        )
        return result

    def parse_text(self, text: str, source_name: str = "<inline>") -> ParsedConfigFile:
        """Parse config text supplied as a **string**."""
        return self.parse(io.StringIO(text), source_name=source_name)

    def parse_file(self, file_path: Union[str, Path]) -> ParsedConfigFile:
        """
        Parse a config **file**.  The file is closed on every exit path.

        Raises
        ------
        ConfigReadError
            The file cannot be opened, read, or decoded.
        """
        logger.info("Parsing file: %s", file_path)
        try:
            handle = open(file_path, "r", encoding=self.encoding)
        except OSError as exc:
            raise ConfigReadError(f"Cannot open config file: {exc}", str(file_path)) from exc
        with handle:
            return self.parse(handle, source_name=str(file_path))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_lines(self, source: ConfigSource, source_name: str) -> Iterator[Tuple[int, str]]:
        lines = iter(source)
        line_no = 0
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigReadError(
                    f"Error reading input: {exc}", source_name, line_no + 1
                ) from exc
            line_no += 1
            if isinstance(raw, bytes):
                try:
                    raw = raw.decode(self.encoding)
                except UnicodeDecodeError as exc:
                    raise ConfigReadError(
                        f"Error decoding input: {exc}", source_name, line_no
                    ) from exc
            yield line_no, raw.rstrip("\r\n")

    @staticmethod
    def _record(result: ParsedConfigFile, line_no: int, outcome: DispatchResult) -> None:
        if isinstance(outcome, Directive):
            result.success_lines.append(ConfigLine(line_no, outcome))
        else:
            logger.debug("line %d: %s", line_no, outcome)
            result.warning_lines.append(ConfigLine(line_no, outcome))


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------

_default_parser = OpenVpnConfigParser()


def parse(source: ConfigSource, source_name: str = "<stream>") -> ParsedConfigFile:
    return _default_parser.parse(source, source_name)


def parse_text(text: str, source_name: str = "<inline>") -> ParsedConfigFile:
    return _default_parser.parse_text(text, source_name)


def parse_file(file_path: Union[str, Path]) -> ParsedConfigFile:
    return _default_parser.parse_file(file_path)
