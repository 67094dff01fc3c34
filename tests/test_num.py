import pytest
from hypothesis import given
from hypothesis import strategies as st

from k1arith import num

ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def test_from_bin_big_endian():
    assert num.from_bin(b"\x01\x00") == 256


def test_from_bin_all_zero_is_zero():
    assert num.from_bin(bytes(32)) == 0


@pytest.mark.parametrize("data", [b"", bytes(65)])
def test_from_bin_rejects_bad_length(data):
    with pytest.raises(ValueError):
        num.from_bin(data)


def test_to_bin_pads_on_the_left():
    assert num.to_bin(1, 4) == b"\x00\x00\x00\x01"


def test_to_bin_uses_absolute_value():
    assert num.to_bin(-300, 2) == num.to_bin(300, 2)


def test_to_bin_rejects_too_short_buffer():
    with pytest.raises(ValueError):
        num.to_bin(256, 1)


def test_order_round_trip_through_bytes():
    encoded = bytes.fromhex(
        "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141"
    )
    assert num.from_bin(encoded) == ORDER
    assert num.to_bin(ORDER, 32) == encoded


@given(st.integers(min_value=0, max_value=(1 << 512) - 1))
def test_bin_round_trip(value):
    assert num.from_bin(num.to_bin(value, 64)) == value


def test_compare_ignores_sign():
    assert num.compare(-5, 3) == 1
    assert num.compare(3, -5) == -1
    assert num.compare(-7, 7) == 0


@given(st.integers(), st.integers())
def test_compare_is_antisymmetric(a, b):
    assert num.compare(a, b) == -num.compare(b, a)


def test_mod_negative_value_is_non_negative():
    assert num.mod(-1, 7) == 6
    assert num.mod(-14, 7) == 0


def test_mod_ignores_modulus_sign():
    assert num.mod(5, -3) == num.mod(5, 3)


def test_mod_zero_modulus_rejected():
    with pytest.raises(ValueError):
        num.mod(5, 0)


@given(st.integers(min_value=-(1 << 300), max_value=1 << 300))
def test_mod_result_in_range(value):
    r = num.mod(value, ORDER)
    assert 0 <= r < ORDER
    assert (value - r) % ORDER == 0


@given(st.integers(min_value=1, max_value=ORDER - 1))
def test_mod_inverse_against_order(value):
    inverse = num.mod_inverse(value, ORDER)
    assert 0 < inverse < ORDER
    assert (value * inverse) % ORDER == 1


def test_mod_inverse_sign_follows_operands():
    positive = num.mod_inverse(3, 7)
    assert num.mod_inverse(-3, 7) == -positive
    assert num.mod_inverse(3, -7) == -positive
    assert num.mod_inverse(-3, -7) == positive


def test_mod_inverse_requires_coprime():
    with pytest.raises(ValueError):
        num.mod_inverse(4, 8)


def test_mod_inverse_requires_value_below_modulus():
    with pytest.raises(ValueError):
        num.mod_inverse(ORDER, ORDER)


def test_shift_keeps_sign():
    assert num.shift(-256, 4) == -16
    assert num.shift(256, 4) == 16


def test_shift_past_all_bits_is_zero():
    assert num.shift(ORDER, 256) == 0


def test_shift_rejects_negative_amount():
    with pytest.raises(ValueError):
        num.shift(1, -1)


@given(st.integers(min_value=0, max_value=1 << 300), st.integers(0, 320))
def test_shift_matches_floor_division(value, bits):
    assert num.shift(value, bits) == value // (1 << bits)