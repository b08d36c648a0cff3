# Copyright (c) 2026, py-fips202 developers

"""SHA3 hash functions as specified in FIPS PUB 202."""

# Load standard packages
from dataclasses import dataclass
import string

# Load external packages
import numpy as np

# Load local packages
from .keccak import keccak_p
from .sponge import pad10_1, sponge
from .state import WIDTH, Bits

# Define SHA3 constants
SUFFIX = np.array([0, 1], dtype=np.uint8)


class InvalidInputLength(ValueError):
    """A hexadecimal message does not describe a whole number of bytes."""

    def __init__(self, message: str = 'expected an even-length hexadecimal string') -> None:
        super().__init__(message)


def bytes_to_bits(data: bytes) -> Bits:
    """Expand bytes into bits, least significant bit of each byte first."""
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder='little')


def bits_to_bytes(bits: Bits) -> bytes:
    """Pack bits into bytes, least significant bit of each byte first."""
    return np.packbits(bits, bitorder='little').tobytes()


def hex_to_bits(msg: str) -> Bits:
    """Convert a hexadecimal message into bits."""
    if len(msg)%2 != 0:
        raise InvalidInputLength()
    if not all(c in string.hexdigits for c in msg):
        raise ValueError('expected hexadecimal digits only')
    return bytes_to_bits(bytes.fromhex(msg))


def bits_to_hex(bits: Bits) -> str:
    """Render bits as a lowercase hexadecimal string."""
    return bits_to_bytes(bits).hex()


@dataclass(frozen=True)
class HashFunction:
    """A SHA3 instance, fixed by its digest size in bits."""

    name: str
    digest_size: int

    @property
    def capacity(self) -> int:
        return 2*self.digest_size

    @property
    def rate(self) -> int:
        return WIDTH - self.capacity

    def hash_bits(self, msg: Bits, verbose: bool = False) -> Bits:
        """Compute the digest bits of a message given as bits."""
        n = np.concatenate([np.asarray(msg, dtype=np.uint8), SUFFIX])
        return sponge(keccak_p, pad10_1, self.rate, n, self.digest_size, verbose=verbose)

    def digest(self, data: bytes, verbose: bool = False) -> bytes:
        """Compute the digest of a byte string."""
        return bits_to_bytes(self.hash_bits(bytes_to_bits(data), verbose))

    def hexdigest(self, msg: str, verbose: bool = False) -> str:
        """Compute the hexadecimal digest of a hexadecimal message."""
        return bits_to_hex(self.hash_bits(hex_to_bits(msg), verbose))

    def __call__(self, msg: str) -> str:
        return self.hexdigest(msg)


SHA3_224 = HashFunction('sha3-224', 224)
SHA3_256 = HashFunction('sha3-256', 256)
SHA3_384 = HashFunction('sha3-384', 384)
SHA3_512 = HashFunction('sha3-512', 512)

HASH_FUNCTIONS: dict[str, HashFunction] = {
    h.name: h for h in (SHA3_224, SHA3_256, SHA3_384, SHA3_512)
}


def sha3_224(msg: str) -> str:
    """Compute SHA3-224 of a hexadecimal message."""
    return SHA3_224.hexdigest(msg)


def sha3_256(msg: str) -> str:
    """Compute SHA3-256 of a hexadecimal message."""
    return SHA3_256.hexdigest(msg)


def sha3_384(msg: str) -> str:
    """Compute SHA3-384 of a hexadecimal message."""
    return SHA3_384.hexdigest(msg)


def sha3_512(msg: str) -> str:
    """Compute SHA3-512 of a hexadecimal message."""
    return SHA3_512.hexdigest(msg)
