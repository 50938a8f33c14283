#!/usr/bin/env python3
"""
CryptoBench Pro - KASUMI Implementation
Single-block KASUMI cipher (3GPP TS 35.202) built on the custom core.

Block modes (CBC, CTR, f8/f9) are left to callers, which query
BLOCK_SIZE / KEY_SIZE or the KASUMI algorithm descriptor.
"""

import logging

from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm

from .base import KasumiImplementationBase
from .kasumi_constants import BLOCK_SIZE, KEY_SIZE, ROUNDS
from .kasumi_core import KasumiCore
from .kasumi_utils import validate_key, validate_rounds
from .key_utils import generate_key, generate_custom_key

# setup logging
logger = logging.getLogger("PythonCore")

# dictionary to track implementations
KASUMI_IMPLEMENTATIONS = {}


def register_kasumi_variant(name):

    def decorator(impl_class):
        KASUMI_IMPLEMENTATIONS[name] = impl_class
        return impl_class
    return decorator


class KASUMI(BlockCipherAlgorithm):
    """
    KASUMI algorithm descriptor in the cryptography package's shape.

    Sizes are in bits, as for algorithms.Camellia. The OpenSSL backend has no
    KASUMI, so this describes the cipher; KasumiCipher does the work.
    """

    name = "KASUMI"
    block_size = BLOCK_SIZE * 8
    key_sizes = frozenset([KEY_SIZE * 8])

    def __init__(self, key):
        validate_key(key)
        self.key = bytes(key)

    @property
    def key_size(self):
        return len(self.key) * 8


class KasumiCipher:
    """
    A KASUMI cipher bound to one key.

    The round keys are derived once here and never change, so an instance
    can be reused for any number of blocks and shared between threads.
    """

    def __init__(self, key):
        self._core = KasumiCore(key)
        logger.debug("KASUMI key schedule derived for %d rounds", self._core.rounds)

    @property
    def block_size(self):
        return BLOCK_SIZE

    @property
    def rounds(self):
        return self._core.rounds

    def encrypt(self, block):
        """Encrypt one 8-byte block and return the ciphertext."""
        return self._core.encrypt_block(block)

    def decrypt(self, block):
        """Decrypt one 8-byte block and return the plaintext."""
        return self._core.decrypt_block(block)

    def encrypt_into(self, dst, src):
        """Encrypt src into the writable 8-byte buffer dst."""
        self._core.encrypt_into(dst, src)

    def decrypt_into(self, dst, src):
        """Decrypt src into the writable 8-byte buffer dst."""
        self._core.decrypt_into(dst, src)


def new_cipher(key):
    """
    Create a KASUMI cipher for the given key.

    Args:
        key: 16-byte key

    Returns:
        KasumiCipher: Cipher bound to the key

    Raises:
        InvalidKeySize: If the key is not exactly 16 bytes
    """
    return new_cipher_with_rounds(key, ROUNDS)


def new_cipher_with_rounds(key, rounds):
    """
    Create a KASUMI cipher with an explicit round count.

    Only the published 8-round structure exists; any other count raises
    InvalidRoundCount instead of being ignored.
    """
    validate_rounds(rounds)
    return KasumiCipher(key)


@register_kasumi_variant("kasumi")
class KasumiImplementation(KasumiImplementationBase):
    """KASUMI implementation for the benchmark registry (one block per call)."""

    def __init__(self, rounds=ROUNDS, **kwargs):
        # Remove mode from kwargs if it exists, KASUMI only runs on single blocks
        kwargs.pop('mode', None)
        is_custom = kwargs.pop('is_custom', False)

        # config files may carry the round count as a string
        rounds = int(rounds)
        validate_rounds(rounds)
        super().__init__(rounds=rounds, is_custom=is_custom)
        self.name = "KASUMI"
        self.description = f"{self.key_size}-bit KASUMI ({self.rounds} rounds)"

        if self.is_custom:
            self.description = f"Custom {self.description}"

    def generate_key(self):
        """
        Generate a key for KASUMI encryption/decryption.

        Returns:
            bytes: The generated 16-byte key
        """
        if self.is_custom:
            self.encryption_key = generate_custom_key()
        else:
            self.encryption_key = generate_key()
        return self.encryption_key

    def _cipher_for(self, key, purpose):
        if key is None:
            key = self.encryption_key

        if key is None:
            raise ValueError(f"{purpose} key is required")

        return new_cipher_with_rounds(key, self.rounds)

    def encrypt(self, data, key=None):
        return self._cipher_for(key, "Encryption").encrypt(data)

    def decrypt(self, data, key=None):
        return self._cipher_for(key, "Decryption").decrypt(data)


def create_kasumi_implementation(**kwargs):
    # drop config keys that belong to other algorithms
    kwargs = {k: v for k, v in kwargs.items() if k in ('rounds', 'is_custom')}
    return KasumiImplementation(**kwargs)


def create_custom_kasumi_implementation(**kwargs):
    kwargs['is_custom'] = True
    return create_kasumi_implementation(**kwargs)


KASUMI_IMPLEMENTATIONS["kasumi_custom"] = create_custom_kasumi_implementation
