"""
Registered OpenVPN configuration commands.

One entry per command the parser recognises, grouped the way the OpenVPN
reference manual groups them.  Names are matched exactly (lowercase,
hyphen-separated); anything not listed here is reported as
``NoMatchingCommand``.

Field names become the attribute names of the generated directive classes in
:mod:`ovpn_config.directives`.
"""
from __future__ import annotations

from typing import Dict, Tuple

from .shapes import (
    CommandSpec,
    fixed,
    flag,
    inline_file,
    optional_varargs,
    server_bridge,
    varargs,
)

COMMAND_TABLE: Tuple[CommandSpec, ...] = (
    # ── General ────────────────────────────────────────────────────────
    flag("help"),
    fixed("config", ["file"]),

    # ── Tunnel options ─────────────────────────────────────────────────
    fixed("mode", ["m"]),
    fixed("local", ["host"]),
    fixed("remote", ["host"], ["port", "proto"]),
    flag("remote-random-hostname"),
    fixed("proto-force", ["p"]),
    flag("remote-random"),
    fixed("proto", ["p"]),
    fixed("connect-retry", ["n"], ["max"]),
    fixed("connect-retry-max", ["n"]),
    flag("show-proxy-settings"),
    fixed("http-proxy", ["server", "port"], ["authfile_or_auto_or_auto_nct", "auth_method"]),
    fixed("http-proxy-option", ["http_proxy_option_type"], ["parm"]),
    inline_file("http-proxy-user-pass"),
    fixed("socks-proxy", ["server"], ["port", "authfile"]),
    fixed("resolv-retry", ["n"]),
    flag("float"),
    fixed("ipchange", ["cmd"]),
    fixed("port", ["port"]),
    fixed("lport", ["port"]),
    fixed("rport", ["port"]),
    fixed("bind", [], ["ipv6only"]),
    flag("nobind"),
    fixed("dev", ["devarg"]),
    fixed("dev-type", ["device_type"]),
    fixed("topology", ["mode"]),
    fixed("dev-node", ["node"]),
    fixed("lladdr", ["address"]),
    fixed("iproute", ["cmd"]),
    fixed("ifconfig", ["l", "rn"]),
    flag("ifconfig-noexec"),
    flag("ifconfig-nowarn"),
    fixed("route", ["network_or_ip"], ["netmask", "gateway", "metric"]),
    fixed("route-gateway", ["gw_or_dhcp"]),
    fixed("route-metric", ["m"]),
    fixed("route-delay", [], ["n", "w"]),
    fixed("route-up", ["cmd"]),
    fixed("route-pre-down", ["cmd"]),
    flag("route-noexec"),
    flag("route-nopull"),
    flag("allow-pull-fqdn"),
    fixed("client-nat", ["snat_or_dnat", "network", "netmask", "alias"]),
    varargs("redirect-gateway", "flags"),
    fixed("link-mtu", ["n"]),
    optional_varargs("redirect-private", "flags"),
    fixed("tun-mtu", ["n"]),
    fixed("tun-mtu-extra", ["n"]),
    fixed("mtu-disc", ["mtu_disc_type"]),
    flag("mtu-test"),
    fixed("fragment", ["max"]),
    fixed("mssfix", ["max"]),
    fixed("sndbuf", ["size"]),
    fixed("rcvbuf", ["size"]),
    fixed("mark", ["value"]),
    varargs("socket-flags", "flags"),
    fixed("txqueuelen", ["n"]),
    fixed("shaper", ["n"]),
    fixed("inactive", ["n"], ["bytes"]),
    fixed("ping", ["n"]),
    fixed("ping-exit", ["n"]),
    fixed("ping-restart", ["n"]),
    fixed("keepalive", ["interval", "timeout"]),
    flag("ping-timer-rem"),
    flag("persist-tun"),
    flag("persist-key"),
    flag("persist-local-ip"),
    flag("persist-remote-ip"),
    flag("mlock"),
    fixed("up", ["cmd"]),
    flag("up-delay"),
    fixed("down", ["cmd"]),
    flag("down-pre"),
    flag("up-restart"),
    fixed("setenv", ["name", "value"]),
    fixed("setenv-safe", ["name", "value"]),
    varargs("ignore-unknown-option", "opts"),
    fixed("script-security", ["level"]),
    flag("disable-occ"),
    fixed("user", ["user"]),
    fixed("group", ["group"]),
    fixed("cd", ["dir"]),
    fixed("chroot", ["dir"]),
    fixed("setcon", ["context"]),
    fixed("daemon", [], ["progname"]),
    fixed("syslog", [], ["progname"]),
    flag("errors-to-stderr"),
    flag("passtos"),
    fixed("inetd", [], ["wait_or_nowait", "progname"]),
    fixed("log", ["file"]),
    fixed("log-append", ["file"]),
    flag("suppress-timestamps"),
    flag("machine-readable-output"),
    fixed("writepid", ["file"]),
    fixed("nice", ["n"]),
    flag("fast-io"),
    flag("multihome"),
    optional_varargs("echo", "parms"),
    fixed("remap-usr1", ["signal"]),
    fixed("verb", ["n"]),
    fixed("status", ["file"], ["n"]),
    fixed("status-version", [], ["n"]),
    fixed("mute", ["n"]),
    fixed("compress", [], ["algorithm"]),
    fixed("comp-lzo", [], ["mode"]),
    flag("comp-noadapt"),
    fixed("management", ["ip", "port"], ["pw_file"]),
    flag("management-client"),
    flag("management-query-passwords"),
    flag("management-query-proxy"),
    flag("management-query-remote"),
    flag("management-external-key"),
    fixed("management-external-cert", ["certificate_hint"]),
    flag("management-forget-disconnect"),
    flag("management-hold"),
    flag("management-signal"),
    fixed("management-log-cache", ["n"]),
    flag("management-up-down"),
    flag("management-client-auth"),
    flag("management-client-pf"),
    fixed("management-client-user", ["u"]),
    fixed("management-client-group", ["g"]),
    fixed("plugin", ["module_pathname"], ["init_string"]),
    fixed("keying-material-exporter", ["label", "len"]),

    # ── Server mode ────────────────────────────────────────────────────
    fixed("server", ["network", "netmask"], ["nopool"]),
    server_bridge("server-bridge"),
    fixed("push", ["option"]),
    flag("push-reset"),
    fixed("push-remove", ["opt"]),
    flag("push-peer-info"),
    flag("disable"),
    fixed("ifconfig-pool", ["start_ip", "end_ip"], ["netmask"]),
    fixed("ifconfig-pool-persist", ["file"], ["seconds"]),
    flag("ifconfig-pool-linear"),
    fixed("ifconfig-push", ["local", "remote_netmask"], ["alias"]),
    fixed("iroute", ["network"], ["netmask"]),
    flag("client-to-client"),
    flag("duplicate-cn"),
    fixed("client-connect", ["cmd"]),
    fixed("client-disconnect", ["cmd"]),
    fixed("client-config-dir", ["dir"]),
    flag("ccd-exclusive"),
    fixed("tmp-dir", ["dir"]),
    fixed("hash-size", ["r", "v"]),
    fixed("bcast-buffers", ["n"]),
    fixed("tcp-queue-limit", ["n"]),
    flag("tcp-nodelay"),
    fixed("max-clients", ["n"]),
    fixed("max-routes-per-client", ["n"]),
    fixed("stale-routes-check", ["n"], ["t"]),
    fixed("connect-freq", ["n", "sec"]),
    fixed("learn-address", ["cmd"]),
    fixed("auth-user-pass-verify", ["cmd", "method"]),
    fixed("auth-gen-token", [], ["lifetime"]),
    flag("opt-verify"),
    flag("auth-user-pass-optional"),
    flag("client-cert-not-required"),
    fixed("verify-client-cert", ["none_optional_require"]),
    flag("username-as-common-name"),
    fixed("compat-names", [], ["no_remapping"]),
    flag("no-name-remapping"),
    fixed("port-share", ["host", "port"], ["dir"]),

    # ── Client mode ────────────────────────────────────────────────────
    flag("client"),
    flag("pull"),
    fixed("pull-filter", ["accept_or_ignore_or_reject", "text"]),
    fixed("auth-user-pass", [], ["up"]),
    fixed("auth-retry", ["auth_retry_type"]),
    fixed("static-challenge", ["t", "e"]),
    fixed("server-poll-timeout", ["n"]),
    fixed("connect-timeout", ["n"]),
    fixed("explicit-exit-notify", [], ["n"]),
    flag("allow-recursive-routing"),

    # ── Data channel encryption ────────────────────────────────────────
    inline_file("secret", ["direction"]),
    fixed("key-direction", ["direction"]),
    fixed("auth", ["alg"]),
    fixed("cipher", ["alg"]),
    fixed("ncp-ciphers", ["cipher_list"]),
    fixed("data-ciphers", ["cipher_list"]),
    fixed("data-ciphers-fallback", ["alg"]),
    flag("ncp-disable"),
    fixed("keysize", ["n"]),
    fixed("prng", ["alg"], ["nsl"]),
    fixed("engine", [], ["engine_name"]),
    flag("no-replay"),
    fixed("replay-window", ["n"], ["t"]),
    flag("mute-replay-warnings"),
    fixed("replay-persist", ["file"]),
    flag("no-iv"),
    flag("use-prediction-resistance"),
    flag("test-crypto"),
    inline_file("tls-auth", ["direction"]),

    # ── TLS mode ───────────────────────────────────────────────────────
    flag("tls-server"),
    flag("tls-client"),
    inline_file("ca"),
    fixed("capath", ["dir"]),
    inline_file("dh"),
    fixed("ecdh-curve", ["name"]),
    inline_file("cert"),
    inline_file("extra-certs"),
    inline_file("key"),
    fixed("tls-version-min", ["version"], ["or_highest"]),
    fixed("tls-version-max", ["version"]),
    inline_file("pkcs12"),
    fixed("verify-hash", ["hash"]),
    varargs("pkcs11-cert-private", "providers"),
    fixed("pkcs11-id", ["name"]),
    flag("pkcs11-id-management"),
    fixed("pkcs11-pin-cache", ["seconds"]),
    varargs("pkcs11-protected-authentication", "providers"),
    varargs("pkcs11-providers", "providers"),
    varargs("pkcs11-private-mode", "modes"),
    fixed("cryptoapicert", ["select_string"]),
    fixed("key-method", ["m"]),
    fixed("tls-cipher", ["l"]),
    fixed("tls-timeout", ["n"]),
    fixed("reneg-bytes", ["n"]),
    fixed("reneg-pkts", ["n"]),
    fixed("reneg-sec", ["n"]),
    fixed("hand-window", ["n"]),
    fixed("tran-window", ["n"]),
    flag("single-session"),
    flag("tls-exit"),
    inline_file("tls-crypt"),
    fixed("askpass", [], ["file"]),
    flag("auth-nocache"),
    fixed("auth-token", ["token"]),
    fixed("tls-verify", ["cmd"]),
    fixed("tls-export-cert", ["directory"]),
    fixed("x509-username-field", ["fieldname"]),
    fixed("verify-x509-name", ["name", "verify_x509_name_type"]),
    fixed("x509-track", ["attribute"]),
    fixed("ns-cert-type", ["client_or_server"]),
    varargs("remote-cert-ku", "values"),
    fixed("remote-cert-eku", ["oid"]),
    fixed("remote-cert-tls", ["client_or_server"]),
    inline_file("crl-verify", ["direction"]),

    # ── Standalone queries ─────────────────────────────────────────────
    flag("show-ciphers"),
    flag("show-digests"),
    flag("show-tls"),
    flag("show-engines"),
    flag("show-curves"),
    flag("genkey"),

    # ── Persistent tunnels ─────────────────────────────────────────────
    flag("mktun"),
    flag("rmtun"),

    # ── Windows-specific ───────────────────────────────────────────────
    fixed("win-sys", ["path"]),
    fixed("ip-win32", ["method"]),
    fixed("route-method", ["m"]),
    fixed("dhcp-option", ["dhcp_option_type"], ["parm"]),
    fixed("tap-sleep", ["n"]),
    flag("show-net-up"),
    flag("block-outside-dns"),
    flag("dhcp-renew"),
    flag("dhcp-release"),
    flag("register-dns"),
    flag("pause-exit"),
    fixed("service", ["exit_event"], ["initial_state_of_event"]),
    flag("show-adapters"),
    fixed("allow-nonadmin", [], ["tap_adapter"]),
    flag("show-valid-subnets"),
    flag("show-net"),
    fixed("show-pkcs11-ids", [], ["provider", "cert_private"]),
    fixed("show-gateway", [], ["v6target"]),

    # ── IPv6 ───────────────────────────────────────────────────────────
    fixed("ifconfig-ipv6", ["ipv6addr", "ipv6remote"]),
    fixed("route-ipv6", ["ipv6addr"], ["gateway", "metric"]),
    fixed("server-ipv6", ["ipv6addr"]),
    fixed("ifconfig-ipv6-pool", ["ipv6addr"]),
    fixed("ifconfig-ipv6-push", ["ipv6addr", "ipv6remote"]),
    fixed("iroute-ipv6", ["ipv6addr"]),
)

COMMANDS: Dict[str, CommandSpec] = {spec.command: spec for spec in COMMAND_TABLE}
