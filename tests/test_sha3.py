"""Tests for the SHA3 hash functions."""

import hashlib

import numpy as np
import pytest

from py_fips202 import (
    HASH_FUNCTIONS,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    InvalidInputLength,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
)
from py_fips202.sha3 import bits_to_hex, hex_to_bits

FUNCTIONS = [SHA3_224, SHA3_256, SHA3_384, SHA3_512]

EMPTY_DIGESTS = {
    'sha3-224': '6b4e03423667dbb73b6e15454f0eb1abd4597f9a1b078e3f5b5a6bc7',
    'sha3-256': 'a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a',
    'sha3-384': (
        '0c63a75b845e4f7d01107d852e4c2485c51a50aaaa94fc61995e71bbee983a2a'
        'c3713831264adb47fb6bd1e058d5f004'
    ),
    'sha3-512': (
        'a69f73cca23a9ac5c8b567dc185a756e97c982164fe25859e0d1dcc1475c80a6'
        '15b2123af1f5f94c11e3e9402c3ac558f500199d95b6d3e301758586281dcd26'
    ),
}

ABC_DIGESTS = {
    'sha3-224': 'e642824c3f8cf24ad09234ee7d3c766fc9a3a5168d0c94ad73b46fdf',
    'sha3-256': '3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532',
    'sha3-384': (
        'ec01498288516fc926459f58e2c6ad8df9b473cb0fc08c2596da7cf0e49be4b2'
        '98d88cea927ac7f539f1edf228376d25'
    ),
    'sha3-512': (
        'b751850b1a57168a5693cd924b6b096e08f621827444f70d884f5d0240d2712e'
        '10e116e9192af3c91a7ec57647e3934057340b4cf408d5a56592f8274eec53f0'
    ),
}

HASHLIB = {
    'sha3-224': hashlib.sha3_224,
    'sha3-256': hashlib.sha3_256,
    'sha3-384': hashlib.sha3_384,
    'sha3-512': hashlib.sha3_512,
}


def test_parameters() -> None:
    assert [(h.capacity, h.rate, h.digest_size) for h in FUNCTIONS] == [
        (448, 1152, 224),
        (512, 1088, 256),
        (768, 832, 384),
        (1024, 576, 512),
    ]
    assert list(HASH_FUNCTIONS.values()) == FUNCTIONS


@pytest.mark.parametrize('h', FUNCTIONS, ids=lambda h: h.name)
def test_empty_message(h) -> None:
    assert h('') == EMPTY_DIGESTS[h.name]


@pytest.mark.parametrize('h', FUNCTIONS, ids=lambda h: h.name)
def test_abc(h) -> None:
    assert h('616263') == ABC_DIGESTS[h.name]
    assert h('616263'.upper()) == ABC_DIGESTS[h.name]


def test_plain_functions() -> None:
    assert sha3_224('616263') == ABC_DIGESTS['sha3-224']
    assert sha3_256('616263') == ABC_DIGESTS['sha3-256']
    assert sha3_384('616263') == ABC_DIGESTS['sha3-384']
    assert sha3_512('616263') == ABC_DIGESTS['sha3-512']


@pytest.mark.parametrize('h', FUNCTIONS, ids=lambda h: h.name)
def test_matches_hashlib(h) -> None:
    rng = np.random.default_rng(11)
    # Lengths around the rate boundary, and messages spanning several blocks
    lengths = [1, h.rate//8 - 1, h.rate//8, h.rate//8 + 1, 3*h.rate//8 + 5]
    for n in lengths:
        data = rng.integers(0, 256, n, dtype=np.uint8).tobytes()
        expected = HASHLIB[h.name](data).hexdigest()
        assert h.digest(data).hex() == expected
        assert h(data.hex()) == expected


@pytest.mark.parametrize('h', FUNCTIONS, ids=lambda h: h.name)
def test_output_length(h) -> None:
    for msg in ('', '00', 'ff'*300):
        digest = h(msg)
        assert len(digest) == h.digest_size//4
        assert digest == digest.lower()


def test_deterministic() -> None:
    for h in FUNCTIONS:
        assert h('deadbeef') == h('deadbeef')


@pytest.mark.parametrize('msg', ['a', 'abc', '0', '12345'])
@pytest.mark.parametrize('h', FUNCTIONS, ids=lambda h: h.name)
def test_odd_length_rejected(h, msg) -> None:
    with pytest.raises(InvalidInputLength, match='expected an even-length hexadecimal string'):
        h(msg)


def test_odd_length_is_value_error() -> None:
    with pytest.raises(ValueError):
        sha3_256('abc')


def test_non_hex_rejected() -> None:
    with pytest.raises(ValueError):
        sha3_256('zz')


@pytest.mark.parametrize('msg', ['ab  ', 'ab\tc', ' ab ', 'a b ', 'ab\n\n'])
def test_whitespace_rejected(msg) -> None:
    # Whitespace would otherwise be skipped, hashing fewer bytes than given
    with pytest.raises(ValueError, match='expected hexadecimal digits only'):
        sha3_256(msg)
    with pytest.raises(ValueError):
        hex_to_bits(msg)


def test_cross_function_distinct() -> None:
    for msg in ('', '616263'):
        digests = [h(msg) for h in FUNCTIONS]
        for i, short in enumerate(digests):
            for long in digests[i + 1:]:
                assert long[:len(short)] != short


def test_hex_bit_order() -> None:
    # Bytes are taken in order, bits within a byte least significant first
    assert hex_to_bits('01').tolist() == [1, 0, 0, 0, 0, 0, 0, 0]
    assert hex_to_bits('8002').tolist() == [0]*7 + [1] + [0, 1] + [0]*6
    assert bits_to_hex(hex_to_bits('0A1b')) == '0a1b'


def test_digest_avalanche() -> None:
    rng = np.random.default_rng(3)
    distances = []
    for _ in range(32):
        data = bytearray(rng.integers(0, 256, 32, dtype=np.uint8).tobytes())
        before = np.unpackbits(np.frombuffer(SHA3_256.digest(bytes(data)), dtype=np.uint8))
        data[rng.integers(32)] ^= 1 << int(rng.integers(8))
        after = np.unpackbits(np.frombuffer(SHA3_256.digest(bytes(data)), dtype=np.uint8))
        distances.append(np.count_nonzero(before != after)/256)
    assert 0.4 < np.mean(distances) < 0.6
