"""
Tests for the command registry and the generated directive classes.
"""
from __future__ import annotations

import copy
import dataclasses

import pytest

from ovpn_config import directives as d
from ovpn_config.directives import DIRECTIVE_CLASSES, INLINE_FILE_COMMANDS, directive_class
from ovpn_config.models import Directive, FilePath, InlineFileContents
from ovpn_config.registry.commands import COMMAND_TABLE, COMMANDS
from ovpn_config.registry.shapes import ArgShape, CommandSpec, fixed, flag


# ─────────────────────────────────────────────────────────────────────────────
# Command table
# ─────────────────────────────────────────────────────────────────────────────


class TestCommandTable:
    def test_no_duplicate_commands(self):
        names = [spec.command for spec in COMMAND_TABLE]
        assert len(names) == len(set(names))

    def test_lookup_covers_table(self):
        assert set(COMMANDS) == {spec.command for spec in COMMAND_TABLE}

    def test_commands_are_lowercase_with_hyphens(self):
        for name in COMMANDS:
            assert name == name.lower()
            assert " " not in name
            assert "_" not in name

    def test_table_size(self):
        assert len(COMMAND_TABLE) >= 230

    def test_inline_file_commands(self):
        assert INLINE_FILE_COMMANDS == {
            "ca", "cert", "extra-certs", "dh", "key", "pkcs12", "crl-verify",
            "http-proxy-user-pass", "tls-auth", "tls-crypt", "secret",
        }

    def test_inline_commands_with_direction(self):
        for name in ("crl-verify", "tls-auth", "secret"):
            assert COMMANDS[name].optional_args == ("direction",)

    def test_server_bridge_is_irregular(self):
        assert COMMANDS["server-bridge"].shape is ArgShape.SERVER_BRIDGE

    @pytest.mark.parametrize(
        "command, shape",
        [
            ("help", ArgShape.NO_ARGS),
            ("remote", ArgShape.FIXED),
            ("route-delay", ArgShape.FIXED),
            ("redirect-gateway", ArgShape.VARARGS),
            ("redirect-private", ArgShape.OPTIONAL_VARARGS),
            ("echo", ArgShape.OPTIONAL_VARARGS),
            ("ca", ArgShape.INLINE_FILE),
        ],
    )
    def test_shapes(self, command, shape):
        assert COMMANDS[command].shape is shape


class TestCommandSpec:
    def test_class_name(self):
        assert CommandSpec("remote-random-hostname", ArgShape.NO_ARGS).class_name == "RemoteRandomHostname"
        assert CommandSpec("x509-username-field", ArgShape.FIXED).class_name == "X509UsernameField"
        assert CommandSpec("ifconfig-ipv6", ArgShape.FIXED).class_name == "IfconfigIpv6"

    def test_fixed_without_args_is_flag(self):
        assert fixed("float", []) == flag("float")

    def test_required_count(self):
        assert COMMANDS["remote"].required_count == 1
        assert COMMANDS["ifconfig"].required_count == 2
        assert COMMANDS["route-delay"].required_count == 0
        assert COMMANDS["redirect-gateway"].required_count == 1
        assert COMMANDS["echo"].required_count == 0
        assert COMMANDS["ca"].required_count == 1


# ─────────────────────────────────────────────────────────────────────────────
# Generated directive classes
# ─────────────────────────────────────────────────────────────────────────────


class TestDirectiveClasses:
    def test_one_class_per_command(self):
        assert set(DIRECTIVE_CLASSES) == set(COMMANDS)

    def test_classes_exposed_on_module(self):
        for cls in DIRECTIVE_CLASSES.values():
            assert getattr(d, cls.__name__) is cls

    def test_command_attribute(self):
        for command, cls in DIRECTIVE_CLASSES.items():
            assert cls.command == command
            assert issubclass(cls, Directive)

    def test_directive_class_lookup(self):
        assert directive_class("remote") is d.Remote
        assert directive_class("no-such-thing") is None

    def test_field_names(self):
        names = [f.name for f in dataclasses.fields(d.Remote)]
        assert names == ["host", "port", "proto"]

    def test_inline_file_fields(self):
        names = [f.name for f in dataclasses.fields(d.TlsAuth)]
        assert names == ["file", "direction"]

    def test_no_args_class_has_no_fields(self):
        assert dataclasses.fields(d.Client) == ()

    def test_optional_fields_default_to_none(self):
        assert d.Remote(host="h") == d.Remote(host="h", port=None, proto=None)

    def test_structural_equality(self):
        a = d.Remote(host="h", port="1194", proto="udp")
        b = d.Remote(host="h", port="1194", proto="udp")
        assert a == b
        assert hash(a) == hash(b)
        assert a != d.Remote(host="h", port="1195", proto="udp")

    def test_different_variants_not_equal(self):
        assert d.Lport(port="1") != d.Rport(port="1")

    def test_immutable(self):
        remote = d.Remote(host="h")
        with pytest.raises(dataclasses.FrozenInstanceError):
            remote.host = "other"  # type: ignore[misc]

    def test_copy_is_equal(self):
        tls = d.TlsAuth(file=InlineFileContents("abc"), direction=None)
        assert copy.deepcopy(tls) == tls
        assert copy.copy(tls) == tls

    def test_repr(self):
        assert repr(d.ResolvRetry(n="10")) == "ResolvRetry(n='10')"

    def test_file_variants(self):
        assert FilePath("a") != InlineFileContents("a")
        assert d.Ca(file=FilePath("ca.crt")) != d.Ca(file=InlineFileContents("ca.crt"))
