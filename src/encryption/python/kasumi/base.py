#!/usr/bin/env python3
"""
CryptoBench Pro - KASUMI Base Implementation
Provides the base class for KASUMI implementations.
"""

from abc import ABC, abstractmethod

from .kasumi_constants import BLOCK_SIZE, KEY_SIZE, ROUNDS


class KasumiImplementationBase(ABC):
    """Base class for KASUMI implementations."""

    def __init__(self, rounds=ROUNDS, is_custom=False):
        """
        Initialize the base class.

        Args:
            rounds: Number of Feistel rounds (KASUMI only defines 8)
            is_custom: Whether to use the custom key generator
        """
        self.key_size = KEY_SIZE * 8
        self.block_size = BLOCK_SIZE
        self.rounds = int(rounds)
        self.mode = "BLOCK"
        self.is_custom = is_custom

        # Initialize keys
        self.encryption_key = None

    @abstractmethod
    def generate_key(self):
        """Generate a key for encryption/decryption."""
        pass

    @abstractmethod
    def encrypt(self, data, key=None):
        """
        Encrypt a single block using KASUMI.

        Args:
            data: 8-byte block to encrypt
            key: Key to use for encryption, or None to use the instance's key

        Returns:
            bytes: Encrypted block
        """
        pass

    @abstractmethod
    def decrypt(self, data, key=None):
        """
        Decrypt a single block using KASUMI.

        Args:
            data: 8-byte block to decrypt
            key: Key to use for decryption, or None to use the instance's key

        Returns:
            bytes: Decrypted block
        """
        pass
