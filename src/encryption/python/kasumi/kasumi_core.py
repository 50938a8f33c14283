import struct

from .kasumi_constants import S7, S9, ROUNDS, rotl16
from .kasumi_key_schedule import KasumiKeySchedule
from .kasumi_utils import validate_block, validate_output_buffer


def fi_function(value, subkey):
    # split the 16-bit input into nine and seven bit halves
    nine = (value >> 7) & 0x1FF
    seven = value & 0x7F

    # first substitution stage
    nine = S9[nine] ^ seven
    seven = S7[seven] ^ (nine & 0x7F)

    # mix in the subkey, same 7/9 split
    seven ^= subkey >> 9
    nine ^= subkey & 0x1FF

    # second substitution stage
    nine = S9[nine] ^ seven
    seven = S7[seven] ^ (nine & 0x7F)

    return (seven << 9) + nine


class KasumiCore:

    def __init__(self, key):
        self.key_schedule = KasumiKeySchedule(key)
        self.rounds = ROUNDS

    def _fo(self, value, round_number):
        ks = self.key_schedule

        left = (value >> 16) & 0xFFFF
        right = value & 0xFFFF

        # three FI stages, each feeding the other half
        left ^= ks.ko1[round_number]
        left = fi_function(left, ks.ki1[round_number])
        left ^= right

        right ^= ks.ko2[round_number]
        right = fi_function(right, ks.ki2[round_number])
        right ^= left

        left ^= ks.ko3[round_number]
        left = fi_function(left, ks.ki3[round_number])
        left ^= right

        # right half goes out on top
        return (right << 16) | left

    def _fl(self, value, round_number):
        ks = self.key_schedule

        left = (value >> 16) & 0xFFFF
        right = value & 0xFFFF

        a = left & ks.kl1[round_number]
        right ^= rotl16(a, 1)

        b = right | ks.kl2[round_number]
        left ^= rotl16(b, 1)

        return (left << 16) | right

    def encrypt_block(self, plaintext_block):
        validate_block(plaintext_block)

        # conversion to two 32-bit halves (big-endian)
        left, right = struct.unpack('>II', plaintext_block)

        # odd rounds use FL then FO, even rounds FO then FL
        n = 0
        while n < self.rounds:
            temp = self._fl(left, n)
            temp = self._fo(temp, n)
            right ^= temp
            n += 1

            temp = self._fo(right, n)
            temp = self._fl(temp, n)
            left ^= temp
            n += 1

        return struct.pack('>II', left, right)

    def decrypt_block(self, ciphertext_block):
        validate_block(ciphertext_block)

        left, right = struct.unpack('>II', ciphertext_block)

        # undo the rounds in reverse order
        n = self.rounds - 1
        while n >= 0:
            temp = self._fo(right, n)
            temp = self._fl(temp, n)
            left ^= temp
            n -= 1

            temp = self._fl(left, n)
            temp = self._fo(temp, n)
            right ^= temp
            n -= 1

        return struct.pack('>II', left, right)

    def encrypt_into(self, dst, src):
        # check both buffers before touching either
        validate_output_buffer(dst)
        validate_block(src)
        dst[:] = self.encrypt_block(src)

    def decrypt_into(self, dst, src):
        validate_output_buffer(dst)
        validate_block(src)
        dst[:] = self.decrypt_block(src)
