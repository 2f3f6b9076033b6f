class Bytes(bytearray):
    """
    Bytearray that keeps its type through slicing and XOR.
    """

    def __init__(self, bytes_like=b'', byteorder: str='big'):
        super().__init__(bytes_like)
        self.byteorder = byteorder


    def __repr__(self):
        return f'<Bytes: {bytes(self)}, byteorder={self.byteorder}>'


    @staticmethod
    def wrap(bytes_like, byteorder: str='big') -> 'Bytes':
        """
        Wraps `bytes_like` in a Bytes object if it isn't one already.

        Parameters:
            bytes_like (bytes): Bytes-like object.
            byteorder    (str): Byteorder of new Bytes object if one is created.

        Returns:
            Bytes: Wrapped object.
        """
        if isinstance(bytes_like, str):
            raise TypeError("Expected a bytes-like object, got 'str'")

        if type(bytes_like) is Bytes:
            return bytes_like

        return Bytes(bytes_like, byteorder)


    def __getitem__(self, idx):
        result = super().__getitem__(idx)
        if type(idx) is slice:
            result = Bytes(result, self.byteorder)

        return result


    def __xor__(self, other):
        return Bytes(bytes(a ^ b for a, b in zip(self, other)), self.byteorder)

    __rxor__ = __xor__
