"""
Tests for directive serialisation and ConfigRenderer.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from ovpn_config import directives as d
from ovpn_config import parse_text
from ovpn_config.models import FilePath, GatewayConfig, InlineFileContents, NoGateway
from ovpn_config.output.renderer import ConfigRenderer
from ovpn_config.registry.commands import COMMAND_TABLE
from ovpn_config.registry.shapes import ArgShape

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def renderer():
    return ConfigRenderer()


# ─────────────────────────────────────────────────────────────────────────────
# Directive.to_line / to_args / to_dict
# ─────────────────────────────────────────────────────────────────────────────


class TestDirectiveSerialisation:
    def test_fixed(self):
        assert d.Remote(host="h", port="1194").to_line() == "remote h 1194"

    def test_no_args(self):
        assert d.Client().to_line() == "client"

    def test_varargs(self):
        assert d.RedirectGateway(flags=("def1", "bypass-dns")).to_args() == ["def1", "bypass-dns"]

    def test_optional_varargs_absent(self):
        assert d.RedirectPrivate(flags=None).to_line() == "redirect-private"

    def test_file_path(self):
        assert d.TlsAuth(file=FilePath("ta.key"), direction="1").to_line() == "tls-auth ta.key 1"

    def test_inline_file(self):
        directive = d.Ca(file=InlineFileContents("A\nB"))
        assert directive.to_line() == "<ca>\nA\nB\n</ca>"
        assert directive.to_args() == []

    def test_server_bridge(self):
        assert d.ServerBridge(arg=NoGateway()).to_line() == "server-bridge nogw"
        gw = d.ServerBridge(arg=GatewayConfig("g", "m", "s", "e"))
        assert gw.to_line() == "server-bridge g m s e"

    def test_to_dict(self):
        assert d.TlsAuth(file=FilePath("ta.key"), direction=None).to_dict() == {
            "command": "tls-auth",
            "args": {"file": {"path": "ta.key"}, "direction": None},
        }

    def test_to_dict_varargs(self):
        assert d.Echo(parms=("a", "b")).to_dict()["args"] == {"parms": ["a", "b"]}

    @pytest.mark.parametrize(
        "spec",
        [s for s in COMMAND_TABLE if s.shape is ArgShape.INLINE_FILE],
        ids=lambda s: s.command,
    )
    def test_file_path_round_trip(self, spec):
        line = f"{spec.command} some/path.pem"
        first = parse_text(line).directives[0]
        again = parse_text(first.to_line()).directives[0]
        assert first == again
        assert first.file == FilePath("some/path.pem")


# ─────────────────────────────────────────────────────────────────────────────
# ConfigRenderer
# ─────────────────────────────────────────────────────────────────────────────


class TestConfigRenderer:
    def test_to_config_round_trip(self, renderer):
        original = (FIXTURES / "client.ovpn").read_text(encoding="utf-8")
        parsed = parse_text(original)
        rendered = renderer.to_config(parsed.directives)
        assert parse_text(rendered).directives == parsed.directives

    def test_to_config_drops_comments(self, renderer):
        parsed = parse_text("# c\nverb 3 # loud\n\nclient\n")
        assert renderer.to_config(parsed.directives) == "verb 3\nclient\n"

    def test_to_config_empty(self, renderer):
        assert renderer.to_config([]) == ""

    def test_to_json_str(self, renderer):
        parsed = parse_text("remote h\nbogus\n")
        data = json.loads(renderer.to_json_str(parsed))
        assert data == {
            "directives": [
                {"line": 1, "command": "remote", "args": {"host": "h", "port": None, "proto": None}},
            ],
            "warnings": [{"line": 2, "warning": "NoMatchingCommand"}],
        }

    def test_to_text(self, renderer):
        parsed = parse_text("remote h 1194\n<ca>\nA\nB\n</ca>\nbogus\n")
        text = renderer.to_text(parsed, source_name="x.ovpn")
        assert "File: x.ovpn" in text
        assert "DIRECTIVES (2)" in text
        assert "remote" in text and "h 1194" in text
        assert "<inline, 2 line(s)>" in text
        assert "WARNINGS (1)" in text
        assert "NoMatchingCommand" in text

    def test_to_text_without_warnings(self, renderer):
        text = renderer.to_text(parse_text("client\n"))
        assert "WARNINGS" not in text
