"""
ovpn_config
===========

A Python parser for OpenVPN configuration files.  Each command line becomes a
typed, immutable directive; ``<ca>`` … ``</ca>`` style blocks become
directives carrying the inline file contents.  Lines that cannot be parsed
are collected as warnings instead of stopping the parse.

Quick start
-----------
>>> from ovpn_config import parse_text, directives as d
>>> parsed = parse_text("remote vpn.example.com 1194\\nbogus-option\\n")
>>> parsed.success_lines[0].result
Remote(host='vpn.example.com', port='1194', proto=None)
>>> [(w.number, str(w.result)) for w in parsed.warning_lines]
[(2, 'NoMatchingCommand')]
"""

from . import directives
from .directives import DIRECTIVE_CLASSES, INLINE_FILE_COMMANDS, ServerBridge
from .exceptions import ConfigReadError
from .models import (
    ConfigLine,
    Directive,
    File,
    FilePath,
    GatewayConfig,
    InlineFileContents,
    NoGateway,
    ParsedConfigFile,
    ParseWarning,
    ServerBridgeArg,
)
from .parser.dispatcher import DirectiveDispatcher, dispatch
from .pipeline.config_parser import OpenVpnConfigParser, parse, parse_file, parse_text

__version__ = "0.1.0"
__all__ = [
    "ConfigLine",
    "ConfigReadError",
    "DIRECTIVE_CLASSES",
    "Directive",
    "DirectiveDispatcher",
    "File",
    "FilePath",
    "GatewayConfig",
    "INLINE_FILE_COMMANDS",
    "InlineFileContents",
    "NoGateway",
    "OpenVpnConfigParser",
    "ParsedConfigFile",
    "ParseWarning",
    "ServerBridge",
    "ServerBridgeArg",
    "directives",
    "dispatch",
    "parse",
    "parse_file",
    "parse_text",
]
