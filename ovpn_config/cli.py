"""
OpenVPN config parser – command-line interface
==============================================

Usage
-----
::

    python -m ovpn_config.cli CONFIG [OPTIONS]

Options
-------
--output, -o     Output file path (default: stdout).
--format, -f     Output format: ``json`` (default), ``text`` or ``config``.
--strict         Exit with status 3 when any line produced a warning.
--verbose, -v    Enable DEBUG logging.

Exit status
-----------
0 on success, 1 when the config cannot be read, 3 with ``--strict`` when
warnings were reported.

Examples
--------
::

    python -m ovpn_config.cli client.ovpn
    python -m ovpn_config.cli client.ovpn -f text
    python -m ovpn_config.cli server.conf -f config -o normalised.conf
    python -m ovpn_config.cli client.ovpn --strict
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .exceptions import ConfigReadError
from .output.renderer import ConfigRenderer
from .pipeline.config_parser import OpenVpnConfigParser

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_WARNINGS = 3


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ovpn-config",
        description="Parse an OpenVPN configuration file into typed directives",
    )
    p.add_argument("config", help="OpenVPN configuration file to parse ('-' for stdin)")
    p.add_argument(
        "--output", "-o",
        default="-",
        metavar="FILE",
        help="Output file (default: stdout)",
    )
    p.add_argument(
        "--format", "-f",
        choices=["json", "text", "config"],
        default="json",
        help="Output format (default: json)",
    )
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the configuration file (default: utf-8)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 3 if any line produced a warning",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config_parser = OpenVpnConfigParser(encoding=args.encoding)
    try:
        if args.config == "-":
            parsed = config_parser.parse(sys.stdin.buffer, source_name="<stdin>")
        else:
            parsed = config_parser.parse_file(args.config)
    except ConfigReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR

    renderer = ConfigRenderer()
    if args.format == "json":
        output_text = renderer.to_json_str(parsed)
    elif args.format == "config":
        output_text = renderer.to_config(parsed.directives).rstrip("\n")
    else:
        output_text = renderer.to_text(parsed, source_name=args.config)

    if args.output == "-":
        print(output_text)
    else:
        Path(args.output).write_text(output_text + "\n", encoding="utf-8")
        print(f"Output written to {args.output}", file=sys.stderr)

    if parsed.warning_lines:
        print(
            f"\nWARNING: {len(parsed.warning_lines)} line(s) could not be parsed:",
            file=sys.stderr,
        )
        for line in parsed.warning_lines:
            print(f"  [line {line.number}] {line.result}", file=sys.stderr)
        if args.strict:
            return EXIT_WARNINGS

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
