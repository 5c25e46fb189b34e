"""Reversible password obfuscation.

This is NOT encryption. Scrambling only keeps passwords from appearing as
plain text in configuration files; anyone holding the scrambled value can
recover the original with :func:`descramble`. Do not use it to protect
secrets.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional


def scramble(secret: Optional[str]) -> Optional[str]:
    """Return the obfuscated form of ``secret`` (``None`` stays ``None``)."""

    if secret is None:
        return None
    return base64.b64encode(secret.encode("utf-8")).decode("ascii")


def descramble(scrambled: Optional[str]) -> Optional[str]:
    """Reverse :func:`scramble`.

    A stored value that cannot be decoded is treated as corrupted and yields an
    empty string.
    """

    if scrambled is None:
        return None
    try:
        return base64.b64decode(scrambled.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError):
        return ""
