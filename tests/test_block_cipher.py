import pytest
import numpy as np

from tubcipher.bits import BitBlock, MalformedBlockError
from tubcipher.cipher_core import (
    TUBBlockCipher, encrypt_block, decrypt_block, encrypt, decrypt,
    encrypt_round, decrypt_round,
)
from tubcipher.key_schedule import (
    InsufficientKeyMaterialError, generate_extended_key, split_round_keys, REQUIRED_KEY_SIZE,
)

ZERO_BLOCK = '0' * 27
ZERO_KEY = '0' * REQUIRED_KEY_SIZE


def random_bits(rng, length):
    return BitBlock(rng.integers(0, 2, length))


def test_zero_plaintext_zero_key():
    ciphertext = encrypt(ZERO_BLOCK, ZERO_KEY)
    assert ciphertext == ZERO_BLOCK
    assert decrypt(ciphertext, ZERO_KEY) == ZERO_BLOCK


@pytest.mark.parametrize("plaintext,big_key,small_key,expected", [
    ('1' + '0' * 26, '0' * 27, '0' * 18, '111' + '0' * 24),
    ('01' + '0' * 25, '0' * 27, '0' * 18, '000111' + '0' * 21),
    ('1' + '0' * 26, '0' * 27, '11' + '0' * 16, '001' + '0' * 24),
    ('0' * 27, '1' + '0' * 26, '0' * 18, '111' + '0' * 24),
])
def test_single_round_known_answers(plaintext, big_key, small_key, expected):
    big_key, small_key = BitBlock.from_string(big_key), BitBlock.from_string(small_key)
    ciphertext = encrypt_round(BitBlock.from_string(plaintext), big_key, small_key)
    assert ciphertext.to_string() == expected
    assert decrypt_round(ciphertext, big_key, small_key).to_string() == plaintext


@pytest.mark.parametrize("num_rounds,expected", [
    (1, '111' + '0' * 24),
    (2, '1' * 9 + '0' * 18),
    (3, '1' * 27),
    (4, '010' * 9),
    (5, '000010000' * 3),
])
def test_reduced_round_known_answers(num_rounds, expected):
    cipher = TUBBlockCipher(num_rounds=num_rounds)
    plaintext = '1' + '0' * 26
    key = '0' * (45 * num_rounds)

    ciphertext = cipher.encrypt_block(plaintext, key)
    assert ciphertext.to_string() == expected
    assert cipher.decrypt_block(ciphertext, key).to_string() == plaintext


def test_round_invertibility():
    rng = np.random.default_rng(10)
    for _ in range(100):
        block = random_bits(rng, 27)
        big_key, small_key = random_bits(rng, 27), random_bits(rng, 18)
        assert decrypt_round(encrypt_round(block, big_key, small_key), big_key, small_key) == block


def test_cipher_round_methods():
    rng = np.random.default_rng(16)
    cipher = TUBBlockCipher()
    block = random_bits(rng, 27)
    big_key, small_key = random_bits(rng, 27), random_bits(rng, 18)

    ciphertext = cipher.encrypt_round(block, big_key, small_key)
    assert ciphertext == encrypt_round(block, big_key, small_key)
    assert cipher.decrypt_round(ciphertext, big_key, small_key) == block
    assert len(cipher.round_keys('0' * 2560)) == 56


def test_full_invertibility():
    rng = np.random.default_rng(11)
    cipher = TUBBlockCipher()
    for _ in range(10):
        key = random_bits(rng, 2560)
        plaintext = random_bits(rng, 27)
        ciphertext = cipher.encrypt_block(plaintext, key)
        assert cipher.decrypt_block(ciphertext, key) == plaintext


def test_invertibility_with_generated_key():
    key = generate_extended_key()
    plaintext = '110100101011100010101011010'
    assert decrypt(encrypt(plaintext, key.to_string()), key.to_string()) == plaintext


def test_determinism():
    rng = np.random.default_rng(12)
    key = random_bits(rng, 2520)
    plaintext = random_bits(rng, 27)

    first = encrypt_block(plaintext, key)
    assert encrypt_block(plaintext, key) == first
    assert TUBBlockCipher().encrypt_block(plaintext, key) == first
    assert decrypt_block(first, key) == decrypt_block(first, key) == plaintext


def test_rounds_follow_key_order():
    rng = np.random.default_rng(13)
    key = random_bits(rng, 2520)
    plaintext = random_bits(rng, 27)

    state = plaintext
    for pair in split_round_keys(key):
        state = encrypt_round(state, pair.big_key, pair.small_key)
    assert encrypt_block(plaintext, key) == state


def test_trailing_key_bits_are_ignored():
    rng = np.random.default_rng(14)
    key = random_bits(rng, 2560)
    plaintext = random_bits(rng, 27)

    assert encrypt_block(plaintext, key) == encrypt_block(plaintext, key[:2520])


def test_key_changes_ciphertext():
    rng = np.random.default_rng(15)
    key = random_bits(rng, 2520)
    other = key ^ BitBlock.from_int(1 << 2519, 2520)
    plaintext = random_bits(rng, 27)

    assert encrypt_block(plaintext, key) != encrypt_block(plaintext, other)


@pytest.mark.parametrize("length", [0, 1000, 2519])
def test_short_key_rejected(length):
    key = '0' * length
    with pytest.raises(InsufficientKeyMaterialError):
        encrypt(ZERO_BLOCK, key)
    with pytest.raises(InsufficientKeyMaterialError):
        decrypt(ZERO_BLOCK, key)


def test_reduced_rounds_need_less_key():
    cipher = TUBBlockCipher(num_rounds=2)
    assert cipher.encrypt_block(ZERO_BLOCK, '0' * 90) == BitBlock.zeros(27)
    with pytest.raises(InsufficientKeyMaterialError):
        cipher.encrypt_block(ZERO_BLOCK, '0' * 89)


@pytest.mark.parametrize("block", ['0' * 26, '0' * 28, '', '0' * 26 + '2', '0' * 26 + ' '])
def test_malformed_block_rejected(block):
    with pytest.raises(MalformedBlockError):
        encrypt(block, ZERO_KEY)
    with pytest.raises(MalformedBlockError):
        decrypt(block, ZERO_KEY)


def test_malformed_key_rejected():
    with pytest.raises(MalformedBlockError):
        encrypt(ZERO_BLOCK, '0' * 2519 + 'x')


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        encrypt(ZERO_BLOCK, '0' * 2519)
    with pytest.raises(ValueError):
        encrypt('0' * 26, ZERO_KEY)


def test_invalid_round_count():
    with pytest.raises(ValueError):
        TUBBlockCipher(num_rounds=0)


def test_accepts_bytes_and_blocks():
    key = BitBlock.from_string(ZERO_KEY)
    assert encrypt_block(ZERO_BLOCK.encode('ascii'), key) == BitBlock.zeros(27)
    assert encrypt_block(BitBlock.zeros(27), ZERO_KEY.encode('ascii')) == BitBlock.zeros(27)
