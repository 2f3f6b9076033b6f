from salsacore.utilities.manipulation import rotl, addw, xorw, get_blocks, MASK32
from salsacore.utilities.bytes import Bytes
from salsacore.utilities.exceptions import InvalidKeyLengthException, InvalidNonceLengthException, CounterOverflowException
from salsacore.core.metadata import SizeType, SizeSpec, EphemeralSpec, EphemeralType
from salsacore.core.primitives import StreamCipher
from salsacore.auxiliary.block_trace import BlockTrace

import logging
log = logging.getLogger(__name__)

CONSTANT     = b"expand 32-byte k"
BLOCK_BYTES  = 64
MAX_COUNTER  = 2**64
VALID_ROUNDS = (8, 12, 20)

_KEY_SPEC   = SizeSpec(size_type=SizeType.SINGLE, sizes=256)
_NONCE_SPEC = SizeSpec(size_type=SizeType.SINGLE, sizes=64)

COLUMN_GROUPS   = ((0, 4,  8, 12), (1, 5,  9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
DIAGONAL_GROUPS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7,  8, 13), (3, 4,  9, 14))


def QUARTER_ROUND(a: int, b: int, c: int, d: int) -> tuple:
    b = xorw(b, rotl(addw(a, d), 7))
    c = xorw(c, rotl(addw(b, a), 9))
    d = xorw(d, rotl(addw(c, b), 13))
    a = xorw(a, rotl(addw(d, c), 18))
    return a, b, c, d


def INVERSE_QUARTER_ROUND(a: int, b: int, c: int, d: int) -> tuple:
    a = xorw(a, rotl(addw(d, c), 18))
    d = xorw(d, rotl(addw(c, b), 13))
    c = xorw(c, rotl(addw(b, a), 9))
    b = xorw(b, rotl(addw(a, d), 7))
    return a, b, c, d


def _apply_groups(state: list, groups: tuple) -> list:
    x = list(state)
    for group in groups:
        for idx, word in zip(group, QUARTER_ROUND(*[x[i] for i in group])):
            x[idx] = word

    return x


def COLUMN_ROUND(state: list) -> list:
    return _apply_groups(state, COLUMN_GROUPS)


def DIAGONAL_ROUND(state: list) -> list:
    return _apply_groups(state, DIAGONAL_GROUPS)


def DOUBLE_ROUND(state: list) -> list:
    return DIAGONAL_ROUND(COLUMN_ROUND(state))



def _check_bytes(value, name: str) -> Bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"'{name}' must be bytes-like, got '{type(value).__name__}'")

    return Bytes.wrap(bytes(value))


def _check_key(key) -> Bytes:
    key = _check_bytes(key, 'key')
    if len(key)*8 not in _KEY_SPEC:
        raise InvalidKeyLengthException(f"Key must be 32 bytes, got {len(key)}")

    return key


def _check_nonce(nonce) -> Bytes:
    nonce = _check_bytes(nonce, 'nonce')
    if len(nonce)*8 not in _NONCE_SPEC:
        raise InvalidNonceLengthException(f"Nonce must be 8 bytes, got {len(nonce)}")

    return nonce


def _check_rounds(rounds: int) -> int:
    if rounds not in VALID_ROUNDS:
        raise ValueError(f"Rounds must be one of {VALID_ROUNDS}, got {rounds}")

    return rounds


def _check_span(counter: int, num_blocks: int):
    if counter < 0:
        raise ValueError(f"Block counter cannot be negative ({counter})")

    if num_blocks < 0:
        raise ValueError(f"Block count cannot be negative ({num_blocks})")

    if counter >= MAX_COUNTER or counter + num_blocks > MAX_COUNTER:
        raise CounterOverflowException(f"Blocks {counter}..{counter + num_blocks} exceed the 64-bit block counter")



def initialize_state(key: bytes, nonce: bytes, block_counter: int=0, constant: bytes=CONSTANT) -> list:
    """
    Builds the 16-word initial state.

    Layout (row-major 4x4): constants (0-3), key (4-11), nonce (12-13), counter low/high (14-15).

    Parameters:
        key           (bytes): Key (32 bytes).
        nonce         (bytes): Nonce (8 bytes).
        block_counter   (int): 64-bit block counter.
        constant      (bytes): Constant (16 bytes).

    Returns:
        list: Initial state words.
    """
    key   = _check_key(key)
    nonce = _check_nonce(nonce)
    _check_span(block_counter, 0)

    if len(constant) != 16:
        raise ValueError(f"Constant must be 16 bytes, got {len(constant)}")

    return [
        *[int.from_bytes(block, 'little') for block in get_blocks(constant, 4)],
        *[int.from_bytes(block, 'little') for block in get_blocks(key, 4)],
        *[int.from_bytes(block, 'little') for block in get_blocks(nonce, 4)],
        block_counter & MASK32,
        block_counter >> 32
    ]


def serialize_state(state: list) -> Bytes:
    return Bytes(b''.join([int.to_bytes(word & MASK32, 4, 'little') for word in state]), byteorder='little')


def _mix(initial: list, rounds: int) -> list:
    working = initial
    for _ in range(rounds // 2):
        working = DOUBLE_ROUND(working)

    return [addw(w, i) for w, i in zip(working, initial)]


def salsa_block(key: bytes, nonce: bytes, block_counter: int=0, rounds: int=20) -> Bytes:
    """
    Computes one 64-byte keystream block.

    Parameters:
        key           (bytes): Key (32 bytes).
        nonce         (bytes): Nonce (8 bytes).
        block_counter   (int): 64-bit block counter.
        rounds          (int): Number of rounds to perform.

    Returns:
        Bytes: Keystream block.
    """
    initial = initialize_state(key, nonce, block_counter)
    return serialize_state(_mix(initial, _check_rounds(rounds)))



class Salsa(StreamCipher):
    """
    Salsa20 stream cipher

    Add-rotate-xor (ARX) structure. Instances hold only the key material; every call is
    independent, so one instance may be shared across threads.
    """

    KEY_SIZE   = _KEY_SPEC
    BLOCK_SIZE = SizeSpec(size_type=SizeType.SINGLE, sizes=512)
    EPHEMERAL  = EphemeralSpec(ephemeral_type=EphemeralType.NONCE, size=_NONCE_SPEC)

    def __init__(self, key: bytes, nonce: bytes, rounds: int=20, constant: bytes=CONSTANT):
        """
        Parameters:
            key      (bytes): Key (32 bytes).
            nonce    (bytes): Nonce (8 bytes).
            rounds     (int): Number of rounds to perform (8, 12 or 20).
            constant (bytes): Constant used in generating the keystream (16 bytes).
        """
        self.key      = _check_key(key)
        self.nonce    = _check_nonce(nonce)
        self.rounds   = _check_rounds(rounds)
        self.constant = _check_bytes(constant, 'constant')

        if len(self.constant) != 16:
            raise ValueError(f"Constant must be 16 bytes, got {len(self.constant)}")


    def initial_state(self, block_num: int=0) -> list:
        return initialize_state(self.key, self.nonce, block_num, self.constant)


    def full_round(self, block_num: int=0, state: list=None) -> Bytes:
        """
        Performs the full Salsa mixing algorithm for one block.

        Parameters:
            block_num (int): Block counter of the keystream block.
            state    (list): Custom initial state to be directly injected.

        Returns:
            Bytes: 64-byte keystream block.
        """
        if state is None:
            state = self.initial_state(block_num)

        elif len(state) != 16:
            raise ValueError(f"State must be 16 words, got {len(state)}")

        return serialize_state(_mix([word & MASK32 for word in state], self.rounds))


    def trace(self, block_num: int=0) -> BlockTrace:
        """
        Computes one block while recording the state after every single round.

        Parameters:
            block_num (int): Block counter of the keystream block.

        Returns:
            BlockTrace: Initial state, each round's state, the added state and the keystream block.
        """
        initial = self.initial_state(block_num)
        working = initial
        states  = []

        for _ in range(self.rounds // 2):
            working = COLUMN_ROUND(working)
            states.append(working)

            working = DIAGONAL_ROUND(working)
            states.append(working)

        added = [addw(w, i) for w, i in zip(working, initial)]
        return BlockTrace(initial_state=initial, round_states=states, after_addition=added, keystream_bytes=serialize_state(added))


    def yield_state(self, start_chunk: int=0, num_chunks: int=1):
        """
        Generates `num_chunks` chunks of keystream starting from `start_chunk`.

        Parameters:
            start_chunk (int): Chunk number to start at.
            num_chunks  (int): Desired number of 64-byte keystream chunks.

        Returns:
            generator: Keystream chunks.
        """
        _check_span(start_chunk, num_chunks)
        return self._yield_state(start_chunk, num_chunks)


    def _yield_state(self, start_chunk: int, num_chunks: int):
        for iteration in range(start_chunk, start_chunk + num_chunks):
            yield self.full_round(iteration)


    def keystream(self, length: int, counter: int=0):
        """
        Lazily generates exactly `length` bytes of keystream, one block at a time.
        Arguments are validated before the generator is returned.

        Parameters:
            length  (int): Desired number of bytes.
            counter (int): Block counter to start at.

        Returns:
            generator: Keystream chunks (64 bytes each, the last one possibly shorter).
        """
        if length < 0:
            raise ValueError(f"Length cannot be negative ({length})")

        num_blocks = -(-length // BLOCK_BYTES)
        _check_span(counter, num_blocks)

        log.debug(f"Keystream of {length} bytes over {num_blocks} blocks from counter {counter}")
        return self._keystream(length, counter, num_blocks)


    def _keystream(self, length: int, counter: int, num_blocks: int):
        remaining = length
        for block in self._yield_state(counter, num_blocks):
            yield block[:remaining]
            remaining -= BLOCK_BYTES


    def generate(self, length: int, counter: int=0) -> Bytes:
        """
        Generates exactly `length` bytes of keystream.

        Parameters:
            length  (int): Desired number of bytes.
            counter (int): Block counter to start at.

        Returns:
            Bytes: Keystream.
        """
        return Bytes(b''.join(self.keystream(length, counter)), byteorder='little')
