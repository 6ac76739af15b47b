import random
import pytest

from rscodec import block, gf, poly
from rscodec.block import rs_check, rs_decode, rs_encode, rs_generator_poly
from rscodec.errors import (
    CouldNotCorrect,
    CouldNotFindMagnitude,
    CouldNotLocateError,
    DataTooLong,
    DataTooShort,
    ErasureOutOfRange,
    InvalidSymbolCount,
    RSDefect,
    RSError,
    TooManyErasures,
    TooManyErrors,
)

from tests.conftest import corrupt_bytes, random_bytes


HELLO_NSYM9 = bytes([104, 101, 108, 108, 111, 32, 119, 111, 114, 108,
                     100, 145, 124, 96, 105, 94, 31, 179, 149, 163])


@pytest.mark.parametrize("nsym", [1, 2, 9, 32])
def test_rs_generator_poly_roots(nsym):
    g = rs_generator_poly(nsym)
    assert len(g) == nsym + 1
    assert g[0] == 1
    for i in range(nsym):
        assert poly.evaluate(g, gf.power(2, i)) == 0


def test_rs_encode_hello_world_known_vector():
    assert rs_encode(b"hello world", nsym=9) == HELLO_NSYM9


def test_rs_decode_hello_world_with_erasures_and_errors():
    cw = bytearray(HELLO_NSYM9)
    for i in range(5):
        cw[i] = i
    cw[15] = 5  # corrupt parity byte

    # 3 erasures (0, 2, 3) + 3 unknown errors (1, 4, 15) = 3 + 2*3 = 9
    assert rs_decode(bytes(cw), nsym=9, erase_pos=[0, 2, 3]) == b"hello world"


def test_rs_encode_is_systematic():
    msg = b"systematic"
    cw = rs_encode(msg, nsym=12)
    assert len(cw) == len(msg) + 12
    assert cw[:len(msg)] == msg


def test_rs_decode_clean_block_is_identity():
    msg = bytes(range(100))
    assert rs_decode(rs_encode(msg, nsym=16), nsym=16) == msg


def test_rs_encode_empty_message():
    cw = rs_encode(b"", nsym=4)
    assert cw == bytes(4)
    assert rs_decode(cw, nsym=4) == b""


def test_rs_full_length_block():
    rng = random.Random(255)
    msg = random_bytes(rng, 255 - 8)
    cw = rs_encode(msg, nsym=8)
    assert len(cw) == 255
    assert rs_decode(corrupt_bytes(rng, cw, [0, 128, 254, 77]), nsym=8) == msg


def test_rs_check_detects_corruption():
    cw = rs_encode(b"check me", nsym=6)
    assert rs_check(cw, nsym=6)
    bad = bytearray(cw)
    bad[3] ^= 0x40
    assert not rs_check(bytes(bad), nsym=6)


def test_rs_decode_erasures_only_up_to_nsym():
    rng = random.Random(99)
    nsym = 10
    msg = random_bytes(rng, 60)
    cw = rs_encode(msg, nsym=nsym)
    positions = rng.sample(range(len(cw)), nsym)
    out = rs_decode(corrupt_bytes(rng, cw, positions), nsym=nsym, erase_pos=positions)
    assert out == msg


def test_rs_decode_erasure_of_intact_byte_is_harmless():
    msg = b"nothing wrong here"
    cw = rs_encode(msg, nsym=6)
    assert rs_decode(cw, nsym=6, erase_pos=[0, 5]) == msg


def test_rs_decode_raises_when_too_many_errors():
    rng = random.Random(5678)
    nsym = 10
    msg = random_bytes(rng, 40)
    cw = rs_encode(msg, nsym=nsym)

    positions = rng.sample(range(len(cw)), nsym // 2 + 1)
    with pytest.raises(RSError):
        rs_decode(corrupt_bytes(rng, cw, positions), nsym=nsym)


def test_rs_encode_rejects_too_long():
    with pytest.raises(DataTooLong):
        rs_encode(bytes(250), nsym=6)
    # exactly at the limit is fine
    assert len(rs_encode(bytes(249), nsym=6)) == 255


def test_rs_decode_rejects_bad_lengths():
    with pytest.raises(DataTooLong):
        rs_decode(bytes(256), nsym=10)
    with pytest.raises(DataTooShort):
        rs_decode(bytes(5), nsym=10)


@pytest.mark.parametrize("nsym", [0, -1, 255, 300, True, False])
def test_rs_rejects_invalid_nsym(nsym):
    with pytest.raises(InvalidSymbolCount):
        rs_encode(b"abc", nsym=nsym)
    with pytest.raises(InvalidSymbolCount):
        rs_decode(bytes(20), nsym=nsym)


def test_rs_decode_rejects_too_many_erasures():
    cw = rs_encode(b"erasures", nsym=4)
    with pytest.raises(TooManyErasures):
        rs_decode(cw, nsym=4, erase_pos=[0, 1, 2, 3, 4])


@pytest.mark.parametrize("pos", [-1, 12])
def test_rs_decode_rejects_erasure_outside_block(pos):
    cw = rs_encode(b"12345678", nsym=4)
    with pytest.raises(ErasureOutOfRange):
        rs_decode(cw, nsym=4, erase_pos=[pos])


def test_defects_and_errors_are_distinct():
    assert issubclass(RSDefect, ValueError)
    assert issubclass(RSError, ValueError)
    assert not issubclass(RSDefect, RSError)
    assert not issubclass(RSError, RSDefect)


def _beyond_block_error(degree: int, nsym: int, magnitude: int = 1) -> bytes:
    """
    Parity-sized pattern with the syndromes of one error at `degree`.

    The parity of a message whose only non-zero byte sits at degree `degree` is
    magnitude * x^degree mod g(x), which shares its syndromes.
    """
    msg = bytes([magnitude]) + bytes(degree - nsym)
    return rs_encode(msg, nsym=nsym)[-nsym:]


def _xor_tail(cw: bytes, tail: bytes) -> bytes:
    out = bytearray(cw)
    for i, t in enumerate(tail):
        out[len(out) - len(tail) + i] ^= t
    return bytes(out)


def test_rs_syndromes_match_horner_evaluation():
    rng = random.Random(0x5D)
    cw = list(random_bytes(rng, 200))
    cw[0] = 0
    synd = block._syndromes(cw, 16)
    assert synd[0] == 0
    for i in range(1, 17):
        assert synd[i] == poly.evaluate(cw, gf.power(2, i - 1))
    assert block._syndromes([0] * 30, 8) == [0] * 9


def test_rs_decode_error_outside_block_cannot_be_located():
    nsym = 10
    cw = rs_encode(b"locate me", nsym=nsym)
    # one error whose locator root falls past the end of this 19-byte block
    bad = _xor_tail(cw, _beyond_block_error(200, nsym))
    assert not rs_check(bad, nsym=nsym)
    with pytest.raises(CouldNotLocateError):
        rs_decode(bad, nsym=nsym)


def test_rs_decode_partially_located_errors_cannot_be_corrected():
    nsym = 10
    cw = rs_encode(b"locate me", nsym=nsym)
    bad = bytearray(_xor_tail(cw, _beyond_block_error(200, nsym)))
    bad[2] ^= 0x21  # the only root the search can find
    with pytest.raises(CouldNotCorrect):
        rs_decode(bytes(bad), nsym=nsym)


def test_rs_decode_single_parity_byte_only_detects():
    cw = bytearray(rs_encode(b"abc", nsym=1))
    cw[1] ^= 0x10
    with pytest.raises(TooManyErrors):
        rs_decode(bytes(cw), nsym=1)


def test_rs_decode_duplicate_erasure_has_no_magnitude():
    cw = bytearray(rs_encode(b"duplicate", nsym=4))
    cw[2] ^= 0x55
    with pytest.raises(CouldNotFindMagnitude):
        rs_decode(bytes(cw), nsym=4, erase_pos=[2, 2])


def test_rs_decode_erasures_without_located_roots_still_corrects():
    rng = random.Random(0xE5)
    nsym = 10
    msg = random_bytes(rng, 60)
    cw = rs_encode(msg, nsym=nsym)
    erasures = rng.sample(range(len(cw)), 4)
    bad = corrupt_bytes(rng, cw, erasures)

    zeroed = list(bad)
    for p in erasures:
        zeroed[p] = 0
    synd = block._syndromes(zeroed, nsym)
    assert max(synd) != 0
    fsynd = block._forney_syndromes(synd, erasures, len(zeroed))
    err_loc = block._error_locator(fsynd, nsym, erase_count=len(erasures))
    assert err_loc == [1]
    assert block._find_errors(err_loc[::-1], len(zeroed)) == []

    assert rs_decode(bad, nsym=nsym, erase_pos=erasures) == msg
