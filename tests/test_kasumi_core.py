import os
import random
import threading
import unittest

from src.encryption.python.kasumi.kasumi_constants import S7, S9, ROUNDS, rotl16
from src.encryption.python.kasumi.kasumi_core import KasumiCore, fi_function
from src.encryption.python.kasumi.kasumi_key_schedule import KasumiKeySchedule
from src.encryption.python.kasumi.kasumi_utils import InvalidBlockLength, InvalidKeySize

KEY = bytes.fromhex("2BD6459F82C5B300952C49104881FF48")


class TestRoundFunctions(unittest.TestCase):

    def test_sboxes_are_permutations(self):
        self.assertEqual(len(S7), 128)
        self.assertEqual(len(S9), 512)
        self.assertEqual(sorted(S7), list(range(128)))
        self.assertEqual(sorted(S9), list(range(512)))

    def test_rotl16(self):
        self.assertEqual(rotl16(0x8000, 1), 0x0001)
        self.assertEqual(rotl16(0x459F, 5), 0xB3E8)
        self.assertEqual(rotl16(0x1234, 8), 0x3412)
        self.assertEqual(rotl16(0xFFFF, 13), 0xFFFF)

    def test_fi_spot_values(self):
        self.assertEqual(fi_function(0x0000, 0x0000), 0xF009)
        self.assertEqual(fi_function(0xFFFF, 0x1234), 0x3254)

    def test_fi_stays_16_bit(self):
        rng = random.Random(1234)
        for _ in range(500):
            result = fi_function(rng.getrandbits(16), rng.getrandbits(16))
            self.assertTrue(0 <= result <= 0xFFFF)

    def test_fl_and_fo_stay_32_bit(self):
        core = KasumiCore(KEY)
        rng = random.Random(99)
        for _ in range(200):
            value = rng.getrandbits(32)
            n = rng.randrange(ROUNDS)
            self.assertTrue(0 <= core._fl(value, n) <= 0xFFFFFFFF)
            self.assertTrue(0 <= core._fo(value, n) <= 0xFFFFFFFF)


class TestKeySchedule(unittest.TestCase):

    def test_shape(self):
        schedule = KasumiKeySchedule(KEY)
        for name in ('kl1', 'kl2', 'ko1', 'ko2', 'ko3', 'ki1', 'ki2', 'ki3'):
            values = getattr(schedule, name)
            self.assertIsInstance(values, tuple)
            self.assertEqual(len(values), ROUNDS)
            self.assertTrue(all(0 <= v <= 0xFFFF for v in values))

    def test_values(self):
        schedule = KasumiKeySchedule(KEY)
        self.assertEqual(schedule.kl1, (0x57AC, 0x8B3E, 0x058B, 0x6601, 0x2A59, 0x9220, 0x9102, 0xFE91))
        self.assertEqual(schedule.kl2, (0x0B6E, 0x7EEF, 0x6BF0, 0xF388, 0x3ED5, 0xCD58, 0x2AF5, 0x00F8))
        self.assertEqual(schedule.ko1, (0xB3E8, 0x58B0, 0x6016, 0xA592, 0x2209, 0x1029, 0xE91F, 0x7AC5))
        self.assertEqual(schedule.ki3, (0xCD58, 0x2AF5, 0x00F8, 0x0B6E, 0x7EEF, 0x6BF0, 0xF388, 0x3ED5))

    def test_round_keys(self):
        round_keys = KasumiKeySchedule(KEY).get_round_keys(0)
        self.assertEqual(round_keys['kl1'], 0x57AC)
        self.assertEqual(round_keys['ko1'], 0xB3E8)
        self.assertEqual(set(round_keys), {'kl1', 'kl2', 'ko1', 'ko2', 'ko3', 'ki1', 'ki2', 'ki3'})

    def test_copies_mutable_key(self):
        key = bytearray(KEY)
        schedule = KasumiKeySchedule(key)
        key[0] ^= 0xFF
        self.assertEqual(schedule.master_key, KEY)
        self.assertEqual(schedule.kl1[0], 0x57AC)

    def test_rejects_bad_length(self):
        for length in (0, 15, 17, 32):
            with self.subTest(length=length):
                with self.assertRaises(InvalidKeySize) as ctx:
                    KasumiKeySchedule(bytes(length))
                self.assertEqual(ctx.exception.length, length)


class TestKasumiCore(unittest.TestCase):

    def setUp(self):
        self.core = KasumiCore(KEY)

    def test_round_trip_random(self):
        rng = random.Random(2024)
        for _ in range(50):
            core = KasumiCore(bytes(rng.getrandbits(8) for _ in range(16)))
            block = bytes(rng.getrandbits(8) for _ in range(8))
            self.assertEqual(core.decrypt_block(core.encrypt_block(block)), block)

    def test_distinct_plaintexts_give_distinct_ciphertexts(self):
        blocks = [i.to_bytes(8, 'big') for i in range(256)]
        ciphertexts = {self.core.encrypt_block(b) for b in blocks}
        self.assertEqual(len(ciphertexts), len(blocks))

    def test_encrypt_changes_block(self):
        self.assertNotEqual(self.core.encrypt_block(bytes(8)), bytes(8))

    def test_block_length_rejected(self):
        for length in (0, 7, 9):
            with self.subTest(length=length):
                with self.assertRaises(InvalidBlockLength) as ctx:
                    self.core.encrypt_block(bytes(length))
                self.assertEqual(ctx.exception.length, length)

                with self.assertRaises(InvalidBlockLength):
                    self.core.decrypt_block(bytes(length))

    def test_output_buffer_length_rejected(self):
        for length in (0, 7, 9):
            with self.subTest(length=length):
                dst = bytearray(b'\xAA' * length)
                with self.assertRaises(InvalidBlockLength):
                    self.core.encrypt_into(dst, bytes(8))
                self.assertEqual(dst, bytearray(b'\xAA' * length))

                with self.assertRaises(InvalidBlockLength):
                    self.core.decrypt_into(dst, bytes(8))

    def test_bad_input_leaves_output_untouched(self):
        dst = bytearray(b'\x55' * 8)
        with self.assertRaises(InvalidBlockLength):
            self.core.encrypt_into(dst, bytes(7))
        self.assertEqual(dst, bytearray(b'\x55' * 8))

    def test_readonly_output_rejected(self):
        with self.assertRaises(TypeError):
            self.core.encrypt_into(bytes(8), bytes(8))
        with self.assertRaises(TypeError):
            self.core.encrypt_into(memoryview(bytes(8)), bytes(8))

    def test_in_place_encrypt(self):
        buffer = bytearray.fromhex("EA024714AD5C4D84")
        self.core.encrypt_into(buffer, buffer)
        self.assertEqual(bytes(buffer), bytes.fromhex("DF1F9B251C0BF45F"))

    def test_non_bytes_block_rejected(self):
        with self.assertRaises(TypeError):
            self.core.encrypt_block("abcdefgh")

    def test_shared_core_across_threads(self):
        blocks = [os.urandom(8) for _ in range(64)]
        expected = [self.core.encrypt_block(b) for b in blocks]
        results = {}

        def worker(index):
            results[index] = [self.core.encrypt_block(b) for b in blocks]

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(results), 4)
        for result in results.values():
            self.assertEqual(result, expected)


if __name__ == "__main__":
    unittest.main()
