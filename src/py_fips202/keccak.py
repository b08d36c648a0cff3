# Copyright (c) 2026, py-fips202 developers

"""A NumPy-based implementation of KECCAK-p[1600, 24]."""

# Load standard packages
import math

# Load external packages
import numpy as np

# Load local packages
from .state import LANE, Bits, State, from_state, rotl, to_state

# Define Keccak constants
LOG_LANE = int(math.log2(LANE))
ROUNDS = 12 + 2*LOG_LANE


def rc(t: int) -> int:
    """Compute the output bit of the round constant LFSR after t steps."""
    r = [1,0,0,0,0,0,0,0]
    for _ in range(t%255):
        r = [0] + r
        r[0] ^= r[8]
        r[4] ^= r[8]
        r[5] ^= r[8]
        r[6] ^= r[8]
        r = r[:8]
    return r[0]


def round_constant(ir: int) -> int:
    """Compute the round constant for round index ir."""
    return sum(rc(j + 7*ir) << (2**j - 1) for j in range(LOG_LANE + 1))


def round_constants(rounds: int = ROUNDS) -> State:
    """Compute the round constant table."""
    table = np.array([round_constant(ir) for ir in range(rounds)], dtype=np.uint64)
    table.setflags(write=False)
    return table


def rho_offsets() -> State:
    """Compute the rho rotation offsets, indexed [x, y]."""
    offsets = np.zeros((5, 5), dtype=np.uint64)
    x, y = 1, 0
    for t in range(24):
        offsets[x,y] = (t + 1)*(t + 2)//2%LANE
        x, y = y, (2*x + 3*y)%5
    offsets.setflags(write=False)
    return offsets


ROUND_CONSTANTS = round_constants()
RHO_OFFSETS = rho_offsets()


def theta(a: State) -> State:
    c = np.bitwise_xor.reduce(a, axis=1)
    d = np.roll(c, 1) ^ rotl(np.roll(c, -1), 1)
    return a ^ d[:,None]


def rho(a: State) -> State:
    return rotl(a, RHO_OFFSETS)


def pi(a: State) -> State:
    x, y = np.indices((5, 5))
    return a[(x + 3*y)%5,x]


def chi(a: State) -> State:
    return a ^ (~np.roll(a, -1, axis=0) & np.roll(a, -2, axis=0))


def iota(a: State, rc: np.uint64) -> State:
    a = a.copy()
    a[0,0] ^= np.uint64(rc)
    return a


def keccak_round(a: State, rc: np.uint64) -> State:
    """Apply a single round: theta, rho, pi, chi and iota."""
    return iota(chi(pi(rho(theta(a)))), rc)


def keccak_p(s: Bits, rounds: int = ROUNDS, constants: State = ROUND_CONSTANTS) -> Bits:
    """Compute a Keccak permutation.

    With fewer than 24 rounds, the last round indices are used, so that
    KECCAK-p[1600, nr] agrees with the tail of KECCAK-f[1600].
    """
    assert 0 < rounds <= len(constants), 'unsupported number of rounds'
    a = to_state(s)
    for ir in range(len(constants) - rounds, len(constants)):
        a = keccak_round(a, constants[ir])
    return from_state(a)
