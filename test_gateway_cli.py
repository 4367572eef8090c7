#!/usr/bin/env python3
"""
Testes da CLI do gateway (comandos executados com onecmd).
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from gateway.gateway_cli import GatewayCLI
from joa import JOAClient


class FakeTransport:
    def __init__(self):
        self.sent = []

    def post(self, url, body):
        self.sent.append((url, body))
        return "OK"


def make_cli():
    transport = FakeTransport()
    cli = GatewayCLI(JOAClient(transport=transport))
    return cli, transport


def test_header_commands(capsys):
    cli, _ = make_cli()
    cli.onecmd("header gateway 10.32.16.1")
    cli.onecmd("header vendor androidnode")
    cli.onecmd("header time on")

    header = cli.client.header
    assert header.gateway_identifier == "10.32.16.1"
    assert header.attributes.vendor == "androidnode"
    assert header.attributes.time is True
    assert "androidnode" in capsys.readouterr().out


def test_report_and_payload(capsys):
    cli, _ = make_cli()
    cli.onecmd("header gateway 0.0.0.0")
    cli.onecmd("header vendor debug")
    cli.onecmd("report f104:00ff:0000:0001 - - 0x0402 0x0000 0x20 1 1474552384381")
    capsys.readouterr()

    cli.onecmd("payload")

    assert capsys.readouterr().out == (
        "MuniRPCv2:0.0.0.0,vendor=debug\n"
        "1\t0\tf104:00ff:0000:0001\t0x0a\t0xf100\t0x0402\t0x0000\t0x20\t1474552384381\t1\n"
    )


def test_payload_error_is_reported(capsys):
    cli, _ = make_cli()
    cli.onecmd("payload")
    assert "no_gatewayidentifier_set" in capsys.readouterr().out


def test_remove_clear_and_post(capsys):
    cli, transport = make_cli()
    cli.client.set_url("http://backoffice/")
    cli.onecmd("header gateway 0.0.0.0")
    cli.onecmd("header vendor debug")
    cli.onecmd("time 1000")
    cli.onecmd("time 2000")
    cli.onecmd("remove 1")
    cli.onecmd("remove 1")

    out = capsys.readouterr().out
    assert "Report 1 removido" in out
    assert "Report 1 não existe" in out

    cli.onecmd("post")
    assert transport.sent == [("http://backoffice/", "MuniRPCv2:0.0.0.0,vendor=debug\n2\tt\t2000\n")]
    assert cli.client.messages == []


def test_invalid_timestamp_does_not_stop_cli(capsys):
    cli, _ = make_cli()
    assert not cli.onecmd("time abc")
    assert "Valor inválido" in capsys.readouterr().out


def test_exit():
    cli, _ = make_cli()
    assert cli.onecmd("exit") is True
