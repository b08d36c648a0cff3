# Copyright (c) 2026, py-fips202 developers

"""Conversions between bit sequences and the 5x5 lane state of Keccak."""

# Load external packages
import numpy as np
import numpy.typing as ntp

# Define state constants
WIDTH = 1600
LANE = WIDTH//25

# Define types
Bits = ntp.NDArray[np.uint8]
State = ntp.NDArray[np.uint64]


def lanes_to_bits(lanes: State) -> Bits:
    """Expand 64-bit lanes into bits, least significant bit first."""
    lanes = np.ascontiguousarray(lanes, dtype='<u8')
    octets = lanes.view(np.uint8).reshape(*lanes.shape, LANE//8)
    return np.unpackbits(octets, axis=-1, bitorder='little')


def bits_to_lanes(bits: Bits) -> State:
    """Pack groups of 64 bits into lanes, least significant bit first."""
    octets = np.packbits(bits, axis=-1, bitorder='little')
    return octets.view('<u8')[..., 0].astype(np.uint64)


def to_state(bits: Bits) -> State:
    """Arrange a 1600-bit sequence as a state array indexed [x, y]."""
    assert bits.shape == (WIDTH,), 'state must be exactly 1600 bits'
    lanes = bits_to_lanes(bits.reshape(5, 5, LANE))
    return np.ascontiguousarray(lanes.T)


def from_state(a: State) -> Bits:
    """Flatten a state array back to a 1600-bit sequence."""
    return lanes_to_bits(a.T).reshape(-1)


def rotl(a: State, n: ntp.ArrayLike) -> State:
    """Rotate lanes left by n bits (element-wise if n is an array)."""
    n = np.asarray(n, dtype=np.uint64)%np.uint64(LANE)
    return (a << n) | (a >> (np.uint64(LANE) - n)%np.uint64(LANE))


def rotr(a: State, n: ntp.ArrayLike) -> State:
    """Rotate lanes right by n bits."""
    n = np.asarray(n, dtype=np.uint64)%np.uint64(LANE)
    return rotl(a, np.uint64(LANE) - n)
