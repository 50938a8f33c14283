#!/usr/bin/env python3
"""
CryptoBench Pro - KASUMI Key Utilities
Provides key generation functions for KASUMI.
"""

import secrets

from Crypto.Random import get_random_bytes

from .kasumi_constants import KEY_SIZE


def generate_key():
    """
    Generate a random 128-bit KASUMI key.

    Returns:
        bytes: Random 16-byte key
    """
    return get_random_bytes(KEY_SIZE)


def generate_custom_key():
    # custom path draws the key byte by byte from the secrets module
    return bytes(secrets.randbits(8) for _ in range(KEY_SIZE))
