MASK32 = 2**32-1


def left_rotate(x: int, amount: int, bits: int=32) -> int:
    """
    Performs a left-rotate.

    Parameters:
        x      (int): Integer to rotate.
        amount (int): Amount to rotate by.
        bits   (int): Bitspace to rotate over.

    Returns:
        int: Rotated integer.
    """
    mask    = 2**bits-1
    amount %= bits
    x      &= mask
    return ((x << amount) | (x >> (bits - amount))) & mask


def get_blocks(buffer: bytes, block_size: int, allow_partials: bool=False) -> list:
    """
    Splits `buffer` into blocks of `block_size`.

    Parameters:
        buffer        (bytes): Bytes-like object to split.
        block_size      (int): Size of each block.
        allow_partials (bool): Whether to keep a trailing partial block.

    Returns:
        list: Blocks of `buffer`.
    """
    stop = len(buffer) if allow_partials else len(buffer) - len(buffer) % block_size
    return [buffer[i:i+block_size] for i in range(0, stop, block_size)]


# 32-bit word primitives
def rotl(x: int, n: int) -> int:
    return left_rotate(x, n, 32)


def addw(x: int, y: int) -> int:
    return (x + y) & MASK32


def xorw(x: int, y: int) -> int:
    return (x ^ y) & MASK32
