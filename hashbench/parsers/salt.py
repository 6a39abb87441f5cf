"""
Salt Resolver
==============

Turns the free-text salt field into the bytes mixed into a hash.

Resolution order:
1. Blank, whitespace-only or placeholder text means "no salt".
2. Strict Base64 (whitespace between quads is tolerated).
3. Anything else is taken literally as UTF-8 bytes.

A plain-text salt that fails Base64 decoding is the expected case, not
an error, so :meth:`SaltResolver.resolve` never raises.  Note that short
words whose length is a multiple of four (``"test"``) are valid Base64
and resolve to their decoded bytes.

References:
    - RFC 4648 (2006). The Base16, Base32, and Base64 Data Encodings.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from shared.config import SALT_PLACEHOLDER


class SaltResolver:
    """Decode user-supplied salt text.

    Usage::

        resolver = SaltResolver()
        resolver.resolve("c2FsdA==")   # b"salt"
        resolver.resolve("world")      # b"world"
        resolver.resolve("   ")        # None

    Args:
        placeholder: Hint text shown in an empty salt field; treated as absent.
    """

    def __init__(self, placeholder: str = SALT_PLACEHOLDER) -> None:
        self.placeholder = placeholder

    def resolve(self, salt_text: Optional[str]) -> Optional[bytes]:
        """Return the salt bytes for *salt_text*, or ``None`` for no salt."""
        if salt_text is None or not salt_text.strip():
            return None
        if salt_text == self.placeholder:
            return None

        decoded = self.decode_base64(salt_text)
        if decoded is not None:
            return decoded
        return salt_text.encode("utf-8")

    @staticmethod
    def decode_base64(text: str) -> Optional[bytes]:
        """Strict Base64 decode; ``None`` when *text* is not valid Base64."""
        compact = "".join(text.split())
        if not compact:
            return None
        try:
            return base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError):
            return None
