"""Digest de integridade dos payloads JOA."""

from joa.security.digest import digest, encode_text, verify_digest

__all__ = ['digest', 'encode_text', 'verify_digest']
