"""
Digest de integridade para payloads JOA.

O atributo 'hash' do header é o MD5 (128 bits, hex minúsculo) do shared
secret concatenado com o payload. O texto é convertido em bytes code unit
a code unit (UTF-16), cada um expandido em UTF-8: caracteres fora do BMP
ficam como dois surrogates de 3 bytes cada, tal como no backoffice.

O texto não sofre a substituição "rn" -> "n" que o JOA.js faz antes do MD5:
textos que contêm "rn" dão aqui um hash diferente do JOA.js.
"""

import hashlib
from typing import Union

from joa.utils.constants import DEFAULT_ENCODING


def encode_text(text: str) -> bytes:
    """
    Converte texto para o byte stream usado no digest.

    Args:
        text: Texto a converter

    Returns:
        Bytes (UTF-8 por code unit UTF-16)
    """
    out = bytearray()
    for char in text:
        code_point = ord(char)
        if code_point > 0xFFFF:
            code_point -= 0x10000
            units = (0xD800 | (code_point >> 10), 0xDC00 | (code_point & 0x3FF))
        else:
            units = (code_point,)

        for unit in units:
            out += chr(unit).encode(DEFAULT_ENCODING, "surrogatepass")

    return bytes(out)


def digest(data: Union[str, bytes]) -> str:
    """
    Calcula o digest MD5 dos dados fornecidos.

    Args:
        data: Texto ou bytes a digerir (bytes são usados tal como estão)

    Returns:
        String hexadecimal de 32 caracteres minúsculos
    """
    if isinstance(data, str):
        data = encode_text(data)

    return hashlib.md5(bytes(data)).hexdigest()


def verify_digest(data: Union[str, bytes], expected: str) -> bool:
    """
    Verifica se o digest dos dados corresponde ao esperado.

    Args:
        data: Dados originais
        expected: Digest hexadecimal a verificar

    Returns:
        True se corresponder, False caso contrário
    """
    return digest(data) == expected.lower()
