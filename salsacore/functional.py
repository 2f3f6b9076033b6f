"""
Stateless entry points over `Salsa`. Key and nonce are raw bytes; text and hex handling belong to the caller.
"""
from salsacore.stream_ciphers.salsa import Salsa, salsa_block
from salsacore.auxiliary.block_trace import BlockTrace
from salsacore.utilities.bytes import Bytes


def generate_keystream(key: bytes, nonce: bytes, length: int, counter: int=0) -> Bytes:
    """
    Generates exactly `length` bytes of Salsa20 keystream.

    Parameters:
        key     (bytes): Key (32 bytes).
        nonce   (bytes): Nonce (8 bytes).
        length    (int): Desired number of bytes.
        counter   (int): Block counter to start at.

    Returns:
        Bytes: Keystream.
    """
    return Salsa(key, nonce).generate(length, counter)


def encrypt(key: bytes, nonce: bytes, plaintext: bytes, counter: int=0) -> Bytes:
    return Salsa(key, nonce).encrypt(plaintext, counter)


def decrypt(key: bytes, nonce: bytes, ciphertext: bytes, counter: int=0) -> Bytes:
    return Salsa(key, nonce).decrypt(ciphertext, counter)


def compute_block_trace(key: bytes, nonce: bytes, block_counter: int=0, rounds: int=20) -> BlockTrace:
    """
    Computes every intermediate state of one Salsa20 block.

    Parameters:
        key           (bytes): Key (32 bytes).
        nonce         (bytes): Nonce (8 bytes).
        block_counter   (int): Block counter.
        rounds          (int): Number of rounds to perform (8, 12 or 20).

    Returns:
        BlockTrace: Initial state, one state per round, the added state and the 64-byte block.
    """
    return Salsa(key, nonce, rounds).trace(block_counter)


__all__ = ["generate_keystream", "encrypt", "decrypt", "compute_block_trace", "salsa_block"]
