import struct

import pytest

from nippon.blowfish import BlowFish

# Published Blowfish vector: all-zero key, all-zero plaintext.
ZERO_VECTOR = (0x4EF99745, 0x6198DD78)


def test_zero_key_known_vector():
    cipher = BlowFish(b"\x00" * 8)
    assert cipher.encrypt_block(0, 0) == ZERO_VECTOR


def test_zero_key_known_vector_decrypts():
    cipher = BlowFish(b"\x00" * 8)
    assert cipher.decrypt_block(*ZERO_VECTOR) == (0, 0)


def test_byte_encryption_uses_little_endian_halves():
    cipher = BlowFish(b"\x00" * 8)
    assert cipher.encrypt(bytes(8)) == struct.pack("<II", *ZERO_VECTOR)


def test_all_ones_key_matches_published_vector_structure():
    cipher = BlowFish(b"\xff" * 8)
    left, right = cipher.encrypt_block(0xFFFFFFFF, 0xFFFFFFFF)
    assert cipher.decrypt_block(left, right) == (0xFFFFFFFF, 0xFFFFFFFF)


@pytest.mark.parametrize("block", [(0, 0), (1, 2), (0xFFFFFFFF, 0), (0x12345678, 0x9ABCDEF0)])
def test_block_round_trip(block):
    cipher = BlowFish("secret")
    encrypted = cipher.encrypt_block(*block)
    assert encrypted != block
    assert cipher.decrypt_block(*encrypted) == block


def test_bytes_round_trip():
    cipher = BlowFish("secret")
    plain = bytes(range(64))
    encrypted = cipher.encrypt(plain)
    assert len(encrypted) == len(plain)
    assert encrypted != plain
    assert cipher.decrypt(encrypted) == plain


def test_trailing_partial_block_is_left_alone():
    cipher = BlowFish("secret")
    plain = bytes(range(19))
    encrypted = cipher.encrypt(plain)
    assert encrypted[16:] == plain[16:]
    assert encrypted[:16] != plain[:16]
    assert cipher.decrypt(encrypted) == plain


def test_short_input_is_unchanged():
    cipher = BlowFish("secret")
    assert cipher.encrypt(b"abc") == b"abc"
    assert cipher.decrypt(b"") == b""


def test_blocks_are_independent():
    cipher = BlowFish("secret")
    block = b"ABCDEFGH"
    encrypted = cipher.encrypt(block * 3)
    assert encrypted == cipher.encrypt(block) * 3


def test_str_key_equals_its_utf8_bytes():
    assert BlowFish("secret").encrypt_block(1, 2) == BlowFish(b"secret").encrypt_block(1, 2)


def test_key_cycles_over_its_bytes():
    assert BlowFish(b"ab").encrypt_block(5, 6) == BlowFish(b"abab").encrypt_block(5, 6)


def test_high_key_bytes_are_sign_extended():
    # A sign-extended 0xFF fills the whole word, hiding the byte before it.
    assert BlowFish(b"\xff").encrypt_block(1, 2) == BlowFish(b"\x00\xff").encrypt_block(1, 2)


def test_empty_key_behaves_like_zero_key():
    assert BlowFish(b"").encrypt_block(3, 4) == BlowFish(b"\x00").encrypt_block(3, 4)


def test_different_keys_give_different_output():
    assert BlowFish("secret").encrypt_block(0, 0) != BlowFish("token").encrypt_block(0, 0)


@pytest.mark.parametrize("block", [(-1, 0), (0, 1 << 32)])
def test_out_of_range_halves_are_rejected(block):
    cipher = BlowFish("secret")
    with pytest.raises(ValueError):
        cipher.encrypt_block(*block)
    with pytest.raises(ValueError):
        cipher.decrypt_block(*block)