"""
Argument shapes
===============

Every registered command is described by a :class:`CommandSpec`: the command
name as it appears in a config file, the :class:`ArgShape` that governs how
its argument tokens are bound, and the field names those tokens bind to.

+--------------------+-------------------------------------------------------+
| Shape              | Binding rule                                          |
+====================+=======================================================+
| NO_ARGS            | No fields.  Extra tokens are ignored.                 |
+--------------------+-------------------------------------------------------+
| FIXED              | ``args`` are required, ``optional_args`` fill from    |
|                    | the remaining tokens.  Extra tokens are ignored.      |
+--------------------+-------------------------------------------------------+
| VARARGS            | All tokens become one tuple; at least one required.   |
+--------------------+-------------------------------------------------------+
| OPTIONAL_VARARGS   | All tokens become one tuple, or ``None`` if none.     |
+--------------------+-------------------------------------------------------+
| INLINE_FILE        | First token is a file path; ``optional_args`` follow. |
|                    | The command may also appear as a ``<name>`` block.    |
+--------------------+-------------------------------------------------------+
| SERVER_BRIDGE      | ``nogw`` or exactly four positional arguments.        |
+--------------------+-------------------------------------------------------+

The helper constructors at the bottom of this module keep the command table
in :mod:`ovpn_config.registry.commands` compact.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence, Tuple


class ArgShape(enum.Enum):
    NO_ARGS = "no_args"
    FIXED = "fixed"
    VARARGS = "varargs"
    OPTIONAL_VARARGS = "optional_varargs"
    INLINE_FILE = "inline_file"
    SERVER_BRIDGE = "server_bridge"


@dataclass(frozen=True)
class CommandSpec:
    """Registry entry for one config-file command."""

    command: str
    shape: ArgShape
    args: Tuple[str, ...] = ()
    optional_args: Tuple[str, ...] = ()

    @property
    def class_name(self) -> str:
        """CamelCase variant name, e.g. ``remote-random-hostname`` → ``RemoteRandomHostname``."""
        return "".join(part.capitalize() for part in self.command.split("-"))

    @property
    def required_count(self) -> int:
        """Minimum number of argument tokens the command accepts."""
        if self.shape is ArgShape.FIXED:
            return len(self.args)
        if self.shape in (ArgShape.VARARGS, ArgShape.INLINE_FILE, ArgShape.SERVER_BRIDGE):
            return 1
        return 0


# ---------------------------------------------------------------------------
# Table helpers
# ---------------------------------------------------------------------------


def flag(command: str) -> CommandSpec:
    return CommandSpec(command, ArgShape.NO_ARGS)


def fixed(
    command: str,
    args: Sequence[str],
    optional_args: Sequence[str] = (),
) -> CommandSpec:
    if not args and not optional_args:
        return flag(command)
    return CommandSpec(command, ArgShape.FIXED, tuple(args), tuple(optional_args))


def varargs(command: str, name: str) -> CommandSpec:
    return CommandSpec(command, ArgShape.VARARGS, (name,))


def optional_varargs(command: str, name: str) -> CommandSpec:
    return CommandSpec(command, ArgShape.OPTIONAL_VARARGS, (), (name,))


def inline_file(command: str, optional_args: Sequence[str] = ()) -> CommandSpec:
    return CommandSpec(command, ArgShape.INLINE_FILE, ("file",), tuple(optional_args))


def server_bridge(command: str) -> CommandSpec:
    return CommandSpec(command, ArgShape.SERVER_BRIDGE, ("arg",))
