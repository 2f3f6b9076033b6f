class CipherInputException(ValueError):
    pass

class InvalidKeyLengthException(CipherInputException):
    pass

class InvalidNonceLengthException(CipherInputException):
    pass

class CounterOverflowException(CipherInputException, OverflowError):
    pass
