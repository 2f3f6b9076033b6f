from salsacore.stream_ciphers.salsa import Salsa
from salsacore.utilities.bytes import Bytes
from salsacore.utilities.runtime import RUNTIME
from tqdm import tqdm
import random

import logging
log = logging.getLogger(__name__)

STATE_BITS = 512


def bit_difference(a: bytes, b: bytes) -> int:
    """
    Hamming distance between two equal-length byte strings.
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch ({len(a)} vs {len(b)})")

    return sum([bin(x ^ y).count('1') for x, y in zip(a, b)])


def _word_difference(a: tuple, b: tuple) -> int:
    return sum([bin(x ^ y).count('1') for x, y in zip(a, b)])


def flip_bit(data: bytes, bit: int) -> Bytes:
    """
    Returns a copy of `data` with bit `bit` inverted (bit 0 is the low bit of byte 0).
    """
    if not 0 <= bit < len(data)*8:
        raise ValueError(f"Bit {bit} out of range for {len(data)} bytes")

    flipped = Bytes(data, byteorder='little')
    flipped[bit // 8] ^= 1 << (bit % 8)
    return flipped


def avalanche_ratio(trials: int=64, rounds: int=20, rng: random.Random=None, visual: bool=None) -> float:
    """
    Estimates the fraction of keystream-block bits that change when a single key bit is flipped.
    Nonce and counter are held fixed within each trial.

    Parameters:
        trials         (int): Number of random (key, bit) trials.
        rounds         (int): Number of rounds to perform.
        rng  (random.Random): Source of randomness. Defaults to `random.SystemRandom`.
        visual        (bool): Show a progress bar. Defaults to `RUNTIME.show_progress`.

    Returns:
        float: Mean fraction of the 512 output bits flipped.
    """
    if trials < 1:
        raise ValueError("'trials' must be positive")

    rng    = rng or random.SystemRandom()
    visual = RUNTIME.show_progress if visual is None else visual

    iterator = range(trials)

    if visual:
        iterator = tqdm(iterator, unit='trial', desc=f"Avalanche (Salsa20/{rounds})")

    total = 0
    for _ in iterator:
        key     = Bytes(rng.getrandbits(256).to_bytes(32, 'little'))
        nonce   = Bytes(rng.getrandbits(64).to_bytes(8, 'little'))
        counter = rng.getrandbits(32)
        bit     = rng.randrange(256)

        block   = Salsa(key, nonce, rounds).full_round(counter)
        flipped = Salsa(flip_bit(key, bit), nonce, rounds).full_round(counter)
        total  += bit_difference(block, flipped)

    ratio = total / (trials * STATE_BITS)
    log.debug(f"Avalanche over {trials} trials (Salsa20/{rounds}): {ratio:.4f}")
    return ratio


def round_diffusion(key: bytes, nonce: bytes, bit: int, block_counter: int=0, rounds: int=20) -> list:
    """
    Tracks how a single flipped key bit spreads through the state, round by round.

    Parameters:
        key           (bytes): Key (32 bytes).
        nonce         (bytes): Nonce (8 bytes).
        bit             (int): Key bit to flip (0-255).
        block_counter   (int): Block counter.
        rounds          (int): Number of rounds to perform.

    Returns:
        list: Fraction of differing state bits for the initial state and after each round.
    """
    base    = Salsa(key, nonce, rounds).trace(block_counter)
    flipped = Salsa(flip_bit(key, bit), nonce, rounds).trace(block_counter)

    return [_word_difference(a, b) / STATE_BITS for a, b in zip(base.states, flipped.states)]
