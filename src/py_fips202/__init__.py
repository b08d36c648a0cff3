# Copyright (c) 2026, py-fips202 developers

"""SHA3 hash functions on top of a NumPy KECCAK-p[1600, 24] permutation."""

from .keccak import keccak_p
from .sha3 import (
    HASH_FUNCTIONS,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    HashFunction,
    InvalidInputLength,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
)
from .sponge import pad10_1, sponge

__all__: tuple[str, ...] = (
    'HASH_FUNCTIONS',
    'HashFunction',
    'InvalidInputLength',
    'SHA3_224',
    'SHA3_256',
    'SHA3_384',
    'SHA3_512',
    'keccak_p',
    'pad10_1',
    'sha3_224',
    'sha3_256',
    'sha3_384',
    'sha3_512',
    'sponge',
)
