from salsacore.core.base_object import BaseObject
from salsacore.core.metadata import SizeType, SizeSpec
from salsacore.utilities.bytes import Bytes


class Primitive(BaseObject):
    KEY_SIZE   = SizeSpec(size_type=SizeType.NA)
    BLOCK_SIZE = SizeSpec(size_type=SizeType.NA)
    EPHEMERAL  = None


class StreamCipher(Primitive):
    """
    Keystream-XOR cipher. Subclasses supply `generate`; encryption and decryption are the same operation.
    """

    def generate(self, length: int, counter: int=0) -> bytes:
        raise NotImplementedError


    def encrypt(self, plaintext: bytes, counter: int=0) -> bytes:
        """
        Encrypts `plaintext` by XORing it with the keystream.

        Parameters:
            plaintext (bytes): Bytes-like object to be encrypted.
            counter     (int): Block to start the keystream at.

        Returns:
            Bytes: Resulting ciphertext.
        """
        plaintext = Bytes.wrap(plaintext)
        keystream = self.generate(len(plaintext), counter)
        return keystream ^ plaintext


    def decrypt(self, ciphertext: bytes, counter: int=0) -> bytes:
        """
        Decrypts `ciphertext` by XORing it with the keystream.

        Parameters:
            ciphertext (bytes): Bytes-like object to be decrypted.
            counter      (int): Block to start the keystream at.

        Returns:
            Bytes: Resulting plaintext.
        """
        return self.encrypt(ciphertext, counter)
