"""
DirectiveDispatcher
===================

Turns a command name and its argument tokens into a typed
:class:`~ovpn_config.models.Directive`, using the registry in
:mod:`ovpn_config.registry.commands`.

The dispatcher is a pure function of the registry: it never mutates state and
can be shared freely.  Failures are returned, not raised:

* :attr:`ParseWarning.NO_MATCHING_COMMAND`  – the name is not registered
  (matching is exact; no prefixes, no case folding).
* :attr:`ParseWarning.NOT_ENOUGH_ARGUMENTS` – fewer tokens than the command
  requires (for ``server-bridge``: anything but ``nogw`` or four tokens).
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Type, Union

from ..directives import DIRECTIVE_CLASSES, ServerBridge
from ..models import (
    Directive,
    FilePath,
    GatewayConfig,
    InlineFileContents,
    NoGateway,
    ParseWarning,
)
from ..registry.commands import COMMANDS
from ..registry.shapes import ArgShape, CommandSpec

logger = logging.getLogger(__name__)

DispatchResult = Union[Directive, ParseWarning]


def _bind_optional(spec: CommandSpec, args: Sequence[str], start: int) -> Dict[str, Optional[str]]:
    return {
        name: args[start + i] if start + i < len(args) else None
        for i, name in enumerate(spec.optional_args)
    }


def _build_server_bridge(args: Sequence[str]) -> DispatchResult:
    if len(args) == 1 and args[0] == "nogw":
        return ServerBridge(arg=NoGateway())
    if len(args) == 4:
        return ServerBridge(
            arg=GatewayConfig(
                gateway=args[0],
                netmask=args[1],
                pool_start_ip=args[2],
                pool_end_ip=args[3],
            )
        )
    return ParseWarning.NOT_ENOUGH_ARGUMENTS


def build_directive(
    spec: CommandSpec,
    directive_cls: Type[Directive],
    args: Sequence[str],
) -> DispatchResult:
    """Bind *args* to the fields of *directive_cls* according to *spec*'s shape."""
    shape = spec.shape

    if shape is ArgShape.NO_ARGS:
        return directive_cls()

    if shape is ArgShape.FIXED:
        required = len(spec.args)
        if len(args) < required:
            return ParseWarning.NOT_ENOUGH_ARGUMENTS
        values: Dict[str, Optional[str]] = dict(zip(spec.args, args))
        values.update(_bind_optional(spec, args, required))
        return directive_cls(**values)

    if shape is ArgShape.VARARGS:
        if not args:
            return ParseWarning.NOT_ENOUGH_ARGUMENTS
        return directive_cls(**{spec.args[0]: tuple(args)})

    if shape is ArgShape.OPTIONAL_VARARGS:
        return directive_cls(**{spec.optional_args[0]: tuple(args) if args else None})

    if shape is ArgShape.INLINE_FILE:
        if not args:
            return ParseWarning.NOT_ENOUGH_ARGUMENTS
        return directive_cls(file=FilePath(args[0]), **_bind_optional(spec, args, 1))

    if shape is ArgShape.SERVER_BRIDGE:
        return _build_server_bridge(args)

    raise ValueError(f"Unhandled argument shape {shape!r} for {spec.command!r}")


class DirectiveDispatcher:
    """Looks up a command in the registry and builds its directive."""

    def dispatch(self, command: str, args: Sequence[str] = ()) -> DispatchResult:
        """
        Build the directive for one command line.

        Parameters
        ----------
        command:
            The command name exactly as written in the config file.
        args:
            The remaining whitespace-separated tokens.

        Returns
        -------
        Directive | ParseWarning
        """
        spec = COMMANDS.get(command)
        if spec is None:
            logger.debug("No matching command: %r", command)
            return ParseWarning.NO_MATCHING_COMMAND

        result = build_directive(spec, DIRECTIVE_CLASSES[command], args)
        if isinstance(result, ParseWarning):
            logger.debug(
                "%s: %d argument(s) given, %d required",
                command, len(args), spec.required_count,
            )
        return result

    def dispatch_inline(self, command: str, contents: str) -> DispatchResult:
        """
        Build the directive for a ``<command>`` … ``</command>`` block.

        The block form carries only the file; optional trailing fields such as
        ``tls-auth``'s ``direction`` are left unset.
        """
        spec = COMMANDS.get(command)
        if spec is None or spec.shape is not ArgShape.INLINE_FILE:
            return ParseWarning.NO_MATCHING_COMMAND
        return DIRECTIVE_CLASSES[command](file=InlineFileContents(contents))


_default_dispatcher = DirectiveDispatcher()


def dispatch(command: str, args: Sequence[str] = ()) -> DispatchResult:
    """Module-level shortcut for :meth:`DirectiveDispatcher.dispatch`."""
    return _default_dispatcher.dispatch(command, args)
