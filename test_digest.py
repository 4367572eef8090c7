#!/usr/bin/env python3
"""
Testes do digest de integridade (MD5 hex).

Testa:
1. Vetores conhecidos (incluindo entrada vazia)
2. Codificação de texto não-ASCII (BMP e fora do BMP)
3. Bytes são digeridos tal como estão
"""

import hashlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from joa.security.digest import digest, encode_text, verify_digest


def test_known_vectors():
    """Vetores de referência."""
    assert digest("munisense_test_12345_!@#$%") == "a29f04502785f7a55253d1f13ae6f487"
    assert digest("") == "d41d8cd98f00b204e9800998ecf8427e"
    assert digest("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_digest_is_lowercase_hex():
    value = digest("MuniRPCv2:0.0.0.0,vendor=debug\n")
    assert len(value) == 32
    assert value == value.lower()
    int(value, 16)


def test_bmp_text_is_utf8():
    """Caracteres do BMP são codificados como UTF-8 normal."""
    text = "sensor à porta, 20°C, ação"
    assert encode_text(text) == text.encode("utf-8")
    assert digest(text) == hashlib.md5(text.encode("utf-8")).hexdigest()


def test_astral_text_is_split_into_surrogates():
    """U+1F600 fica como dois surrogates de 3 bytes (D83D, DE00)."""
    assert encode_text("\U0001F600") == b"\xed\xa0\xbd\xed\xb8\x80"
    assert digest("\U0001F600") == hashlib.md5(b"\xed\xa0\xbd\xed\xb8\x80").hexdigest()


def test_bytes_are_digested_as_is():
    data = b"\x00\xff\x10raw"
    assert digest(data) == hashlib.md5(data).hexdigest()


def test_rn_sequence_is_not_rewritten():
    assert digest("return") == hashlib.md5(b"return").hexdigest()


def test_verify_digest():
    assert verify_digest("abc", "900150983CD24FB0D6963F7D28E17F72")
    assert not verify_digest("abd", "900150983cd24fb0d6963f7d28e17f72")
