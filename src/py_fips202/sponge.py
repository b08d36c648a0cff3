# Copyright (c) 2026, py-fips202 developers

"""The sponge construction with multi-rate padding."""

# Load standard packages
from typing import Callable
import sys

# Load external packages
import numpy as np

# Load local packages
from .state import WIDTH, Bits

# Define types
Permutation = Callable[[Bits], Bits]
Padding = Callable[[int, int], Bits]


def pad10_1(rate: int, length: int) -> Bits:
    """Compute the pad10*1 bits that align a message of given length to the rate."""
    j = (-length - 2)%rate
    p = np.zeros(j + 2, dtype=np.uint8)
    p[0] = p[-1] = 1
    return p


def sponge(f: Permutation, pad: Padding, rate: int, msg: Bits, d: int,
           width: int = WIDTH, verbose: bool = False) -> Bits:
    """Absorb a message and squeeze d output bits.

    The message is padded to a multiple of the rate and absorbed block by
    block into an all-zero state. Output is then read off the first `rate`
    bits of the state, applying `f` between output blocks only when more
    bits are still needed.
    """
    assert 0 < rate <= width, 'rate must be within the permutation width'
    msg = np.asarray(msg, dtype=np.uint8)
    p = np.concatenate([msg, pad(rate, len(msg))])
    assert len(p)%rate == 0
    n = len(p)//rate
    s = np.zeros(width, dtype=np.uint8)
    zeros = np.zeros(width - rate, dtype=np.uint8)
    for i in range(n):
        if verbose:
            print(f'Absorbing block {i + 1}/{n}', file=sys.stderr)
        s = f(s ^ np.concatenate([p[i*rate:(i+1)*rate], zeros]))

    z = [s[:rate]]
    while sum(len(b) for b in z) < d:
        if verbose:
            print(f'Squeezing block {len(z) + 1}', file=sys.stderr)
        s = f(s)
        z.append(s[:rate])
    return np.concatenate(z)[:d]
