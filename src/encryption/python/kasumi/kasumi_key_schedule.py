#!/usr/bin/env python3
"""
KASUMI Key Schedule
Implements the key schedule algorithm for KASUMI encryption.
Based on 3GPP TS 35.202, section 4.
"""

import struct

from .kasumi_constants import KEY_CONSTANTS, ROUNDS, rotl16
from .kasumi_utils import validate_key


class KasumiKeySchedule:
    """KASUMI key schedule implementation."""

    def __init__(self, key):
        """
        Initialize key schedule with the 128-bit master key.

        Args:
            key: Master key (16 bytes)

        Raises:
            InvalidKeySize: If the key is not exactly 16 bytes
        """
        validate_key(key)

        self.master_key = bytes(key)
        self.subkeys = self._generate_subkeys()

        # expose the round key arrays directly, index n is round n
        self.kl1 = self.subkeys['kl1']
        self.kl2 = self.subkeys['kl2']
        self.ko1 = self.subkeys['ko1']
        self.ko2 = self.subkeys['ko2']
        self.ko3 = self.subkeys['ko3']
        self.ki1 = self.subkeys['ki1']
        self.ki2 = self.subkeys['ki2']
        self.ki3 = self.subkeys['ki3']

    def _generate_subkeys(self):
        """
        Generate the eight round key arrays.

        Returns:
            dict: Round key name mapped to a tuple of 8 16-bit subkeys
        """
        # split the key into eight big-endian 16-bit words
        ukey = struct.unpack('>8H', self.master_key)
        kprime = [ukey[i] ^ KEY_CONSTANTS[i] for i in range(8)]

        subkeys = {name: [] for name in ('kl1', 'kl2', 'ko1', 'ko2', 'ko3', 'ki1', 'ki2', 'ki3')}

        for n in range(ROUNDS):
            subkeys['kl1'].append(rotl16(ukey[n], 1))
            subkeys['kl2'].append(kprime[(n + 2) % 8])
            subkeys['ko1'].append(rotl16(ukey[(n + 1) % 8], 5))
            subkeys['ko2'].append(rotl16(ukey[(n + 5) % 8], 8))
            subkeys['ko3'].append(rotl16(ukey[(n + 6) % 8], 13))
            subkeys['ki1'].append(kprime[(n + 4) % 8])
            subkeys['ki2'].append(kprime[(n + 3) % 8])
            subkeys['ki3'].append(kprime[(n + 7) % 8])

        # freeze so the schedule can't be changed after construction
        return {name: tuple(values) for name, values in subkeys.items()}

    def get_round_keys(self, round_number):
        """Get all subkeys for one round as a dict."""
        return {name: values[round_number] for name, values in self.subkeys.items()}
