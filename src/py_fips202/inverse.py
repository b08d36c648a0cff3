# Copyright (c) 2026, py-fips202 developers

"""Inverses of the Keccak step mappings and of KECCAK-p[1600, 24]."""

# Load standard packages
from functools import cache

# Load external packages
import numpy as np
import numpy.typing as ntp

# Load local packages
from .keccak import RHO_OFFSETS, ROUND_CONSTANTS, ROUNDS, iota
from .state import LANE, Bits, State, bits_to_lanes, from_state, lanes_to_bits, rotl, rotr, to_state

# Define types
Matrix = ntp.NDArray[np.uint8]


def parity_effect(c: Bits) -> Bits:
    """Map column parities to column parities after theta (bits [..., x, z])."""
    d = np.roll(c, 1, axis=-2) ^ np.roll(np.roll(c, -1, axis=-2), 1, axis=-1)
    return c ^ d


def gf2_inverse(m: Matrix) -> Matrix:
    """Invert a square binary matrix over GF(2) by Gauss-Jordan elimination."""
    n = len(m)
    a = np.concatenate([m & 1, np.eye(n, dtype=np.uint8)], axis=1)
    for col in range(n):
        candidates = np.flatnonzero(a[col:,col])
        if len(candidates) == 0:
            raise np.linalg.LinAlgError('matrix is singular over GF(2)')
        pivot = col + candidates[0]
        a[[col, pivot]] = a[[pivot, col]]
        rows = np.flatnonzero(a[:,col])
        rows = rows[rows != col]
        a[rows] ^= a[col]
    return a[:,n:]


@cache
def parity_inverse() -> Matrix:
    """Compute the inverse of the theta parity map as a 320x320 matrix."""
    n = 5*LANE
    basis = np.eye(n, dtype=np.uint8).reshape(n, 5, LANE)
    m = parity_effect(basis).reshape(n, n).T
    inverse = gf2_inverse(m)
    inverse.setflags(write=False)
    return inverse


def theta_inv(a: State) -> State:
    c_out = lanes_to_bits(np.bitwise_xor.reduce(a, axis=1)).reshape(-1)
    c_in = (parity_inverse().astype(np.int64) @ c_out.astype(np.int64)) & 1
    c = bits_to_lanes(c_in.astype(np.uint8).reshape(5, LANE))
    d = np.roll(c, 1) ^ rotl(np.roll(c, -1), 1)
    return a ^ d[:,None]


def rho_inv(a: State) -> State:
    return rotr(a, RHO_OFFSETS)


def pi_inv(a: State) -> State:
    x, y = np.indices((5, 5))
    return a[y,2*(x - y)%5]


@cache
def chi_row_inverse() -> ntp.NDArray[np.intp]:
    """Tabulate the inverse of chi acting on a single 5-bit row."""
    v = np.arange(32)
    bits = [(v >> x) & 1 for x in range(5)]
    out = sum((bits[x] ^ ((bits[(x+1)%5] ^ 1) & bits[(x+2)%5])) << x for x in range(5))
    return np.argsort(out)


def chi_inv(a: State) -> State:
    bits = lanes_to_bits(a).astype(np.intp)
    rows = sum(bits[x] << x for x in range(5))
    rows = chi_row_inverse()[rows]
    out = np.stack([(rows >> x) & 1 for x in range(5)]).astype(np.uint8)
    return bits_to_lanes(out)


def iota_inv(a: State, rc: np.uint64) -> State:
    return iota(a, rc)


def inverse_round(a: State, rc: np.uint64) -> State:
    """Undo a single round: iota, chi, pi, rho and theta."""
    return theta_inv(rho_inv(pi_inv(chi_inv(iota_inv(a, rc)))))


def inverse_keccak_p(s: Bits, rounds: int = ROUNDS, constants: State = ROUND_CONSTANTS) -> Bits:
    """Invert keccak_p with the same number of rounds and constants."""
    assert 0 < rounds <= len(constants), 'unsupported number of rounds'
    a = to_state(s)
    for ir in reversed(range(len(constants) - rounds, len(constants))):
        a = inverse_round(a, constants[ir])
    return from_state(a)
