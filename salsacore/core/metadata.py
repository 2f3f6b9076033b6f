from enum import Enum


class SizeType(Enum):
    NA     = 0
    SINGLE = 1
    RANGE  = 2


class EphemeralType(Enum):
    NONCE = 0


class SizeSpec(object):
    def __init__(self, size_type: SizeType, sizes: list=None):
        """
        Parameters:
            size_type (SizeType): How `sizes` is interpreted.
            sizes   (int/list): Size in bits (SINGLE) or allowed sizes in bits (RANGE).
        """
        self.size_type = size_type
        self.sizes     = sizes


    def __repr__(self):
        return f"<SizeSpec: size_type={self.size_type}, sizes={self.sizes}>"


    def __contains__(self, bits: int) -> bool:
        if self.size_type == SizeType.SINGLE:
            return bits == self.sizes

        elif self.size_type == SizeType.RANGE:
            return bits in self.sizes

        return True


class EphemeralSpec(object):
    def __init__(self, ephemeral_type: EphemeralType, size: SizeSpec):
        self.ephemeral_type = ephemeral_type
        self.size           = size


    def __repr__(self):
        return f"<EphemeralSpec: ephemeral_type={self.ephemeral_type}, size={self.size}>"
