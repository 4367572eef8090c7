#!/usr/bin/env python3
"""
Testes da composição do payload (header + queue + hash).

Testa:
1. Propagação dos erros do header
2. Hash desativado/ativado e no_secret_set
3. Posição e cálculo do hash
4. Vetores de referência do backoffice
"""

import re
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from joa.protocol.errors import ErrorCode
from joa.protocol.header import HeaderAttributes, HeaderConfig
from joa.protocol.message_queue import MessageQueue
from joa.protocol.payload import PayloadComposer, hash_payload
from joa.security.digest import digest


def make_config(gateway="0.0.0.0", vendor="debug", time=False, hash=False, secret=None):
    return HeaderConfig(
        gateway_identifier=gateway,
        attributes=HeaderAttributes(vendor=vendor, time=time, hash=hash, secret=secret),
    )


def test_header_errors_are_propagated():
    result = PayloadComposer(make_config(gateway=""), MessageQueue()).compose()
    assert not result.ok
    assert result.code == ErrorCode.NO_GATEWAYIDENTIFIER_SET
    assert result.payload is None

    result = PayloadComposer(make_config(vendor=None, hash=True, secret=None), MessageQueue()).compose()
    assert result.code == ErrorCode.NO_VENDOR_ATTRIBUTE_SET


def test_without_hash_secret_is_ignored():
    for secret in (None, "simplesecret"):
        result = PayloadComposer(make_config(secret=secret), MessageQueue()).compose()
        assert result.ok
        assert result.payload == "MuniRPCv2:0.0.0.0,vendor=debug\n"


@pytest.mark.parametrize("secret", [None, ""])
def test_hash_without_secret(secret):
    result = PayloadComposer(make_config(time=True, hash=True, secret=secret), MessageQueue()).compose()
    assert result.code == ErrorCode.NO_SECRET_SET


def test_hash_empty_queue_reference():
    result = PayloadComposer(make_config(hash=True, secret="simplesecret"), MessageQueue()).compose()
    assert result.unwrap() == "MuniRPCv2:0.0.0.0,vendor=debug,hash=4928105608ed5adc908e5d4282c89c68\n"


def test_hash_covers_secret_header_and_body():
    queue = MessageQueue()
    queue.add_time(1000)
    queue.add_zcl_report("eui", None, None, "0x0402", "0x0000", "0x29", 1001, 21)
    config = make_config(time=True, hash=True, secret="k")

    payload = PayloadComposer(config, queue).compose().unwrap()

    unhashed = "MuniRPCv2:0.0.0.0,vendor=debug,time\n" + queue.serialize()
    expected_hash = digest("k" + unhashed)
    assert payload == (
        "MuniRPCv2:0.0.0.0,vendor=debug,time,hash=" + expected_hash + "\n" + queue.serialize()
    )
    assert re.match(r"^[^\n]*,hash=[0-9a-f]{32}\n", payload)


def test_hash_payload_inserts_before_first_eol():
    assert hash_payload("H\nB\n", "s") == "H,hash=" + digest("sH\nB\n") + "\nB\n"


def test_composer_reads_current_state():
    queue = MessageQueue()
    composer = PayloadComposer(make_config(), queue)
    first = composer.compose().unwrap()
    queue.add_time(5)
    second = composer.compose().unwrap()
    assert first == "MuniRPCv2:0.0.0.0,vendor=debug\n"
    assert second == first + "1\tt\t5\n"


def test_end_to_end_reference():
    """Cenário de referência do backoffice (id 4 depois de três reports e um clear)."""
    print("=" * 60)
    print("TEST: payload de referência com hash")
    print("=" * 60)

    queue = MessageQueue()
    queue.add_zcl_report(123, "a", "b", "c", "d", "e", 1000, "hello")
    queue.add_zcl_report(123, None, None, "c", "d", "e", 1000, "hello")
    queue.add_zcl_report(123, None, None, "c", "d", "e", 1000, "hello")
    queue.clear_messages()
    queue.add_zcl_report("f104:00ff:0000:0001", None, None, "0x0402", "0x0000",
                         "0x20", 1474552384381, "1")

    config = HeaderConfig.from_dict({
        "attribute": {
            "vendor": "androidnode",
            "time": True,
            "hash": True,
            "secret": "waiga6ieGo4eefo2thaQuash4ahc4aid",
        },
        "gatewayIdentifier": "10.32.16.1",
    })

    assert PayloadComposer(config, queue).compose().unwrap() == (
        "MuniRPCv2:10.32.16.1,vendor=androidnode,time,hash=2419746b3a7ed995a1caadb93c4973c3\n"
        "4\t0\tf104:00ff:0000:0001\t0x0a\t0xf100\t0x0402\t0x0000\t0x20\t1474552384381\t1\n"
    )
