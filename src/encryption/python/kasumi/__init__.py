#!/usr/bin/env python3
"""
KASUMI Encryption Implementation
The 64-bit block, 128-bit key Feistel cipher from 3GPP TS 35.202.
"""

from .kasumi_constants import BLOCK_SIZE, KEY_SIZE, ROUNDS
from .kasumi_utils import KasumiError, InvalidKeySize, InvalidBlockLength, InvalidRoundCount
from .implementation import (
    KASUMI,
    KASUMI_IMPLEMENTATIONS,
    KasumiCipher,
    KasumiImplementation,
    new_cipher,
    new_cipher_with_rounds,
    create_kasumi_implementation,
    create_custom_kasumi_implementation,
)

__all__ = [
    'BLOCK_SIZE',
    'KEY_SIZE',
    'ROUNDS',
    'KasumiError',
    'InvalidKeySize',
    'InvalidBlockLength',
    'InvalidRoundCount',
    'KASUMI',
    'KASUMI_IMPLEMENTATIONS',
    'KasumiCipher',
    'KasumiImplementation',
    'new_cipher',
    'new_cipher_with_rounds',
    'create_kasumi_implementation',
    'create_custom_kasumi_implementation',
    'register_kasumi_implementations',
]


def register_kasumi_implementations():
    """
    Register all KASUMI implementations with the benchmarking system.
    This function should be called by the main Python encryption module.
    """
    return dict(KASUMI_IMPLEMENTATIONS)
