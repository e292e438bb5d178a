"""
Core data models for the OpenVPN config parser.

Directive variants themselves are generated from the command table in
:mod:`ovpn_config.directives`; this module holds the types they are built
from and the containers the parser returns.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar


# ---------------------------------------------------------------------------
# File arguments
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class File:
    """Base of the two ways a certificate / key file can be supplied."""


@dataclass(frozen=True)
class FilePath(File):
    """A path given as a plain command argument, e.g. ``ca ca.crt``."""

    path: str


@dataclass(frozen=True)
class InlineFileContents(File):
    """
    The verbatim text between ``<name>`` and ``</name>`` marker lines.

    Lines are joined with ``\\n``; the marker lines are not included.
    """

    contents: str


# ---------------------------------------------------------------------------
# server-bridge argument
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServerBridgeArg:
    """Base of the two ``server-bridge`` argument forms."""


@dataclass(frozen=True)
class NoGateway(ServerBridgeArg):
    """``server-bridge nogw``"""


@dataclass(frozen=True)
class GatewayConfig(ServerBridgeArg):
    """``server-bridge gateway netmask pool-start-IP pool-end-IP``"""

    gateway: str
    netmask: str
    pool_start_ip: str
    pool_end_ip: str


# ---------------------------------------------------------------------------
# Directive base
# ---------------------------------------------------------------------------


def _field_tokens(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, FilePath):
        return [value.path]
    if isinstance(value, InlineFileContents):
        # Inline contents cannot be expressed as an argument token.
        return []
    if isinstance(value, NoGateway):
        return ["nogw"]
    if isinstance(value, GatewayConfig):
        return [value.gateway, value.netmask, value.pool_start_ip, value.pool_end_ip]
    raise TypeError(f"Unsupported directive field value: {value!r}")


def _field_json(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, FilePath):
        return {"path": value.path}
    if isinstance(value, InlineFileContents):
        return {"inline": value.contents}
    if isinstance(value, NoGateway):
        return "nogw"
    if isinstance(value, GatewayConfig):
        return {
            "gateway": value.gateway,
            "netmask": value.netmask,
            "pool_start_ip": value.pool_start_ip,
            "pool_end_ip": value.pool_end_ip,
        }
    return value


@dataclass(frozen=True)
class Directive:
    """
    One fully parsed configuration command.

    Concrete variants (``Remote``, ``TlsAuth``, ``ServerBridge`` …) are
    frozen dataclasses, so equality and copying are value-based.
    """

    command: ClassVar[str] = ""

    @property
    def inline_file(self) -> Optional[InlineFileContents]:
        """The inline file carried by this directive, if any."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, InlineFileContents):
                return value
        return None

    def to_args(self) -> List[str]:
        """Argument tokens that reproduce this directive on a command line."""
        tokens: List[str] = []
        for f in fields(self):
            tokens.extend(_field_tokens(getattr(self, f.name)))
        return tokens

    def to_line(self) -> str:
        """
        Render the directive as config-file text.

        Directives carrying :class:`InlineFileContents` render as a
        ``<command>`` … ``</command>`` block; the block form has no room for
        trailing arguments, so any optional fields are dropped.
        """
        inline = self.inline_file
        if inline is not None:
            return f"<{self.command}>\n{inline.contents}\n</{self.command}>"
        return " ".join([self.command, *self.to_args()])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "args": {f.name: _field_json(getattr(self, f.name)) for f in fields(self)},
        }


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------


class ParseWarning(enum.Enum):
    """Why a source line did not produce a directive."""

    NOT_ENOUGH_ARGUMENTS = "NotEnoughArguments"
    NO_MATCHING_COMMAND = "NoMatchingCommand"
    UNTERMINATED_INLINE_BLOCK = "UnterminatedInlineBlock"

    def __str__(self) -> str:
        return self.value


T = TypeVar("T")
D = TypeVar("D", bound=Directive)


@dataclass(frozen=True)
class ConfigLine(Generic[T]):
    """A parse result tagged with its 1-based source line number."""

    number: int
    result: T


@dataclass
class ParsedConfigFile:
    """
    Everything the parser produced for one config file.

    Both lists are in ascending line-number order.
    """

    success_lines: List[ConfigLine[Directive]] = field(default_factory=list)
    warning_lines: List[ConfigLine[ParseWarning]] = field(default_factory=list)

    @property
    def directives(self) -> List[Directive]:
        return [line.result for line in self.success_lines]

    @property
    def warnings(self) -> List[ParseWarning]:
        return [line.result for line in self.warning_lines]

    def find(self, directive_type: Type[D]) -> List[D]:
        """Return every parsed directive of *directive_type*, in file order."""
        return [d for d in self.directives if isinstance(d, directive_type)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directives": [
                {"line": line.number, **line.result.to_dict()}
                for line in self.success_lines
            ],
            "warnings": [
                {"line": line.number, "warning": str(line.result)}
                for line in self.warning_lines
            ],
        }
