"""
Directive variants
==================

One frozen dataclass per registered command, generated once at import time
from :data:`~ovpn_config.registry.commands.COMMAND_TABLE`.  Each class is
bound as an attribute of this module under its CamelCase name, so callers
write::

    from ovpn_config import directives as d

    d.Remote(host="vpn.example.com", port="1194", proto=None)
    d.TlsAuth(file=FilePath("ta.key"), direction="1")

Field types follow the command's :class:`~ovpn_config.registry.shapes.ArgShape`:

* required argument      → ``str``
* optional argument      → ``Optional[str]`` (default ``None``)
* varargs                → ``Tuple[str, ...]``
* optional varargs       → ``Optional[Tuple[str, ...]]`` (default ``None``)
* inline-file argument   → :class:`~ovpn_config.models.File`

``ServerBridge`` is written by hand because its payload is a
:class:`~ovpn_config.models.ServerBridgeArg` rather than plain strings.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple, Type

from .models import Directive, File, ServerBridgeArg
from .registry.commands import COMMAND_TABLE
from .registry.shapes import ArgShape, CommandSpec


@dataclass(frozen=True)
class ServerBridge(Directive):
    """``server-bridge nogw`` or ``server-bridge gateway netmask pool-start pool-end``."""

    command = "server-bridge"

    arg: ServerBridgeArg


def _variant_fields(spec: CommandSpec) -> List[tuple]:
    if spec.shape is ArgShape.VARARGS:
        return [(spec.args[0], Tuple[str, ...])]
    if spec.shape is ArgShape.OPTIONAL_VARARGS:
        return [(spec.optional_args[0], Optional[Tuple[str, ...]], dataclasses.field(default=None))]

    required_type = File if spec.shape is ArgShape.INLINE_FILE else str
    result: List[tuple] = [(name, required_type) for name in spec.args]
    result.extend(
        (name, Optional[str], dataclasses.field(default=None))
        for name in spec.optional_args
    )
    return result


def _make_variant(spec: CommandSpec) -> Type[Directive]:
    cls = dataclasses.make_dataclass(
        spec.class_name,
        _variant_fields(spec),
        bases=(Directive,),
        frozen=True,
        namespace={
            "command": spec.command,
            "__doc__": f"``{spec.command}`` directive.",
        },
    )
    cls.__module__ = __name__
    return cls


def _build_registry() -> Dict[str, Type[Directive]]:
    registry: Dict[str, Type[Directive]] = {}
    for spec in COMMAND_TABLE:
        if spec.shape is ArgShape.SERVER_BRIDGE:
            registry[spec.command] = ServerBridge
        else:
            registry[spec.command] = _make_variant(spec)
    return registry


#: Registered command name → directive class.
DIRECTIVE_CLASSES: Dict[str, Type[Directive]] = _build_registry()

#: Commands that may also be written as a ``<name>`` … ``</name>`` block.
INLINE_FILE_COMMANDS: FrozenSet[str] = frozenset(
    spec.command for spec in COMMAND_TABLE if spec.shape is ArgShape.INLINE_FILE
)

globals().update({cls.__name__: cls for cls in DIRECTIVE_CLASSES.values()})


def directive_class(command: str) -> Optional[Type[Directive]]:
    """Return the directive class registered for *command*, or ``None``."""
    return DIRECTIVE_CLASSES.get(command)

