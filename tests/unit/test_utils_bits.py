import pytest
from asm374.utils import u32, field_bits, sign_extend, is_unsigned_nbit, is_signed_nbit, to_bin32, to_hex32, group_bits

def test_u32_and_formats():
    assert u32(-1) == 0xFFFFFFFF
    assert to_bin32(1) == "0"*31 + "1"
    assert to_hex32(0x1234, prefix=True) == "0x00001234"
    assert to_hex32(0xFFFFFFFF) == "0xffffffff"
    assert to_hex32(0xAB, prefix=False) == "000000ab"

def test_field_bits_twos_complement():
    assert field_bits(-2, 19) == (1 << 19) - 2
    assert field_bits(-1, 4) == 0xF
    assert field_bits(5, 19) == 5
    with pytest.raises(ValueError):
        field_bits(1, 0)

@pytest.mark.parametrize("v", [-(1 << 18), -1000, -2, -1, 0, 1, 3, 135, (1 << 18) - 1])
def test_19bit_round_trip(v):
    assert sign_extend(field_bits(v, 19), 19) == v

def test_sign_extend():
    assert sign_extend(0x80, 8) == -128
    assert sign_extend(0x7F, 8) == 127

def test_nbit_checks():
    assert is_unsigned_nbit(31, 5)
    assert not is_unsigned_nbit(32, 5)
    assert is_signed_nbit((1 << 18) - 1, 19)
    assert is_signed_nbit(-(1 << 18), 19)
    assert not is_signed_nbit(1 << 18, 19)
    assert not is_signed_nbit(-(1 << 18) - 1, 19)

def test_group_bits():
    assert group_bits("0000100110000", (5, 4, 4)) == "00001 0011 0000"
    assert group_bits("1100", (2, 2), sep="|") == "11|00"
    with pytest.raises(ValueError):
        group_bits("1100", (2, 1))
