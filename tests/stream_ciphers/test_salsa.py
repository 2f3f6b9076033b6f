from salsacore.stream_ciphers.salsa import Salsa, salsa_block, initialize_state, serialize_state, QUARTER_ROUND, INVERSE_QUARTER_ROUND, COLUMN_ROUND, DIAGONAL_ROUND, DOUBLE_ROUND, COLUMN_GROUPS, DIAGONAL_GROUPS
from salsacore.utilities.exceptions import InvalidKeyLengthException, InvalidNonceLengthException, CounterOverflowException, CipherInputException
import random
import unittest

KEY   = bytes(range(32))
NONCE = bytes(8)

BLOCK_0 = bytes.fromhex('7551ea1d1bc90aecc71c0521ffb60c467cdded4358c92e228c27f9a906f6bbcd12dd1b6293158bbddf0753d31e23f173bd6386081730d10a69de5e99856381f3')
BLOCK_1 = bytes.fromhex('0a1635f5b1a8abf84e50de4da9c396c9cc5a9ee21b54d737f4874a2604589b0a89793b68719d25601bffbbf9da71ba7c6b9e402031ae68f765a17e671fed5519')


class QuarterRoundTestCase(unittest.TestCase):
    # Reference quarterround examples for Salsa20
    def test_vectors(self):
        self.assertEqual(QUARTER_ROUND(0, 0, 0, 0), (0, 0, 0, 0))
        self.assertEqual(QUARTER_ROUND(1, 0, 0, 0), (0x08008145, 0x00000080, 0x00010200, 0x20500000))
        self.assertEqual(QUARTER_ROUND(0, 1, 0, 0), (0x88000100, 0x00000001, 0x00000200, 0x00402000))
        self.assertEqual(QUARTER_ROUND(0xe7e8c006, 0xc4f9417d, 0x6479b4b2, 0x68c67137), (0xe876d72b, 0x9361dfd5, 0xf1460244, 0x948541a3))


    def test_inverse(self):
        rand = random.Random(1)
        for _ in range(200):
            words = tuple(rand.getrandbits(32) for _ in range(4))
            self.assertEqual(INVERSE_QUARTER_ROUND(*QUARTER_ROUND(*words)), words)
            self.assertEqual(QUARTER_ROUND(*INVERSE_QUARTER_ROUND(*words)), words)


    def test_outputs_are_words(self):
        for word in QUARTER_ROUND(0xffffffff, 0xffffffff, 0xffffffff, 0xffffffff):
            self.assertTrue(0 <= word < 2**32)



class RoundTestCase(unittest.TestCase):
    def test_groups_partition_state(self):
        for groups in (COLUMN_GROUPS, DIAGONAL_GROUPS):
            self.assertEqual(sorted(i for group in groups for i in group), list(range(16)))


    def test_rounds_do_not_mutate(self):
        state    = initialize_state(KEY, NONCE, 0)
        original = list(state)

        COLUMN_ROUND(state)
        DIAGONAL_ROUND(state)
        DOUBLE_ROUND(state)
        self.assertEqual(state, original)


    def test_double_round_order(self):
        state = initialize_state(KEY, NONCE, 0)
        self.assertEqual(DOUBLE_ROUND(state), DIAGONAL_ROUND(COLUMN_ROUND(state)))
        self.assertNotEqual(DOUBLE_ROUND(state), COLUMN_ROUND(DIAGONAL_ROUND(state)))


    def test_column_round_touches_columns(self):
        state = [0]*16
        state[0] = 1
        mixed = COLUMN_ROUND(state)
        self.assertEqual([mixed[i] for i in (0, 4, 8, 12)], list(QUARTER_ROUND(1, 0, 0, 0)))
        self.assertEqual([mixed[i] for i in range(16) if i not in (0, 4, 8, 12)], [0]*12)


    def test_diagonal_round_touches_diagonals(self):
        state = [0]*16
        state[1] = 1
        mixed = DIAGONAL_ROUND(state)
        self.assertEqual([mixed[i] for i in (1, 6, 11, 12)], list(QUARTER_ROUND(1, 0, 0, 0)))
        self.assertEqual([mixed[i] for i in range(16) if i not in (1, 6, 11, 12)], [0]*12)



class StateTestCase(unittest.TestCase):
    def test_layout(self):
        state = initialize_state(KEY, NONCE, 0)
        self.assertEqual(len(state), 16)
        self.assertEqual(state[:4], [0x61707865, 0x3320646e, 0x79622d32, 0x6b206574])
        self.assertEqual(state[4:12], [0x03020100, 0x07060504, 0x0b0a0908, 0x0f0e0d0c, 0x13121110, 0x17161514, 0x1b1a1918, 0x1f1e1d1c])
        self.assertEqual(state[12:], [0, 0, 0, 0])


    def test_nonce_and_counter_words(self):
        state = initialize_state(KEY, bytes.fromhex('0102030405060708'), 0x1122334455667788)
        self.assertEqual(state[12:14], [0x04030201, 0x08070605])
        self.assertEqual(state[14:16], [0x55667788, 0x11223344])


    def test_serialize_little_endian(self):
        self.assertEqual(serialize_state([0x61707865] + [0]*15)[:4], b'expa')
        self.assertEqual(len(serialize_state([0]*16)), 64)


    def test_rejects_bad_key(self):
        for size in (0, 16, 31, 33, 64):
            self.assertRaises(InvalidKeyLengthException, lambda: initialize_state(bytes(size), NONCE))


    def test_rejects_bad_nonce(self):
        for size in (0, 7, 9, 12, 24):
            self.assertRaises(InvalidNonceLengthException, lambda: initialize_state(KEY, bytes(size)))


    def test_rejects_text(self):
        self.assertRaises(TypeError, lambda: initialize_state(KEY.hex(), NONCE))
        self.assertRaises(TypeError, lambda: initialize_state(KEY, 'abcdefgh'))


    def test_counter_range(self):
        self.assertRaises(CounterOverflowException, lambda: initialize_state(KEY, NONCE, 2**64))
        self.assertRaises(ValueError, lambda: initialize_state(KEY, NONCE, -1))
        self.assertEqual(initialize_state(KEY, NONCE, 2**64-1)[14:], [0xffffffff, 0xffffffff])


    def test_exception_hierarchy(self):
        for exc in (InvalidKeyLengthException, InvalidNonceLengthException, CounterOverflowException):
            self.assertTrue(issubclass(exc, CipherInputException))
            self.assertTrue(issubclass(exc, ValueError))

        self.assertTrue(issubclass(CounterOverflowException, OverflowError))



class SalsaBlockTestCase(unittest.TestCase):
    def test_known_answer(self):
        self.assertEqual(salsa_block(KEY, NONCE, 0), BLOCK_0)
        self.assertEqual(salsa_block(KEY, NONCE, 1), BLOCK_1)


    def test_high_counter_word(self):
        self.assertEqual(salsa_block(KEY, NONCE, 2**32), bytes.fromhex('a37328615acc8b9d1ad033daa76272d5a13386e806f39db3932db46b2f72d8563ca1c9d02df8046f15c09b1ae01cc2821f0631aa5b3513df4e6ef39baf3d555c'))
        self.assertEqual(salsa_block(KEY, NONCE, 2**64-1), bytes.fromhex('d8627f1f4f9ffa4afbcd7aba0234ad4a8d4c7640a6a7b7fa4365440224633082a570dea6411ec2015beb9b971be23b70d41f0ee29cfdd8de5599ba547c9dd174'))


    def test_reduced_rounds(self):
        self.assertEqual(salsa_block(KEY, NONCE, 0, rounds=8), bytes.fromhex('2e0e62b2748730df8c03be48f2904451af552f95261d3585de04ff2ae621c6fa42c9fbe81c4c69712e41ad6ac114096826df5b2d2e309bba688c748384ab5bd6'))
        self.assertEqual(salsa_block(KEY, NONCE, 0, rounds=12), bytes.fromhex('f3aecb092cd930988a674754131a770694b5692ed01fd114f7e2e962fa006bad639cb731a8a8265735210c52cfef9bb34356e60db3e829d327a1d2ef23607e50'))
        self.assertRaises(ValueError, lambda: salsa_block(KEY, NONCE, 0, rounds=10))


    def test_deterministic(self):
        self.assertEqual(salsa_block(KEY, NONCE, 7), salsa_block(KEY, NONCE, 7))
        self.assertEqual(Salsa(KEY, NONCE).full_round(7), salsa_block(KEY, NONCE, 7))


    def test_nonce_changes_block(self):
        self.assertNotEqual(salsa_block(KEY, bytes.fromhex('0001020304050607'), 0), BLOCK_0)



class SalsaTestCase(unittest.TestCase):
    def test_full_round(self):
        salsa = Salsa(KEY, NONCE)
        self.assertEqual(salsa.full_round(0), BLOCK_0)
        self.assertEqual(salsa.full_round(1), BLOCK_1)


    def test_injected_state(self):
        salsa = Salsa(KEY, NONCE)
        self.assertEqual(salsa.full_round(state=salsa.initial_state(1)), BLOCK_1)
        self.assertRaises(ValueError, lambda: salsa.full_round(state=[0]*15))


    def test_validation(self):
        self.assertRaises(InvalidKeyLengthException, lambda: Salsa(bytes(16), NONCE))
        self.assertRaises(InvalidNonceLengthException, lambda: Salsa(KEY, bytes(12)))
        self.assertRaises(ValueError, lambda: Salsa(KEY, NONCE, rounds=7))
        self.assertRaises(ValueError, lambda: Salsa(KEY, NONCE, constant=b'too short'))


    def test_metadata(self):
        self.assertIn(256, Salsa.KEY_SIZE)
        self.assertNotIn(128, Salsa.KEY_SIZE)
        self.assertIn(64, Salsa.EPHEMERAL.size)


    def test_accepts_bytes_like(self):
        self.assertEqual(Salsa(bytearray(KEY), memoryview(NONCE)).full_round(0), BLOCK_0)


    def test_encrypt_decrypt(self):
        salsa     = Salsa(KEY, NONCE)
        plaintext = b'This is a secret message.'
        ciphertext = salsa.encrypt(plaintext)

        self.assertEqual(ciphertext, bytes(a ^ b for a, b in zip(plaintext, BLOCK_0)))
        self.assertEqual(salsa.decrypt(ciphertext), plaintext)


    def test_encrypt_at_counter(self):
        salsa = Salsa(KEY, NONCE)
        self.assertEqual(salsa.encrypt(bytes(64), counter=1), BLOCK_1)


    def test_equal_but_unhashable(self):
        a, b = Salsa(KEY, NONCE), Salsa(KEY, NONCE)
        self.assertEqual(a, b)
        self.assertNotEqual(a, Salsa(KEY, NONCE, rounds=8))
        self.assertRaises(TypeError, lambda: hash(a))
        self.assertRaises(TypeError, lambda: {a, b})
