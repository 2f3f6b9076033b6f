from salsacore.functional import generate_keystream, encrypt, decrypt, compute_block_trace, salsa_block
from salsacore.stream_ciphers.salsa import Salsa
from salsacore.auxiliary.block_trace import BlockTrace
from salsacore.utilities.exceptions import CipherInputException, InvalidKeyLengthException, InvalidNonceLengthException, CounterOverflowException
from salsacore.utilities.runtime import RUNTIME

__version__ = "0.1.0"

__all__ = [
    "generate_keystream", "encrypt", "decrypt", "compute_block_trace", "salsa_block",
    "Salsa", "BlockTrace", "RUNTIME",
    "CipherInputException", "InvalidKeyLengthException", "InvalidNonceLengthException", "CounterOverflowException"
]
