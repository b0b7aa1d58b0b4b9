import pytest
import numpy as np

from tubcipher.analysis import (
    evaluate_sbox, calculate_ddt, calculate_lat, calculate_differential_uniformity,
    calculate_linear_bias, is_bijective, is_inverse_pair,
    avalanche_profile, avalanche_ratio, avalanche_matrix,
)
from tubcipher.bits import BitBlock
from tubcipher.cipher_core import TUBBlockCipher, SBOX, INV_SBOX
from tubcipher.key_schedule import InsufficientKeyMaterialError


def test_cipher_sbox_is_bijective():
    assert is_bijective(SBOX)
    assert is_bijective(INV_SBOX)
    assert not is_bijective([0, 0, 1, 2, 3, 4, 5, 6])


def test_stored_inverse_matches():
    assert is_inverse_pair(SBOX, INV_SBOX)
    assert is_inverse_pair(INV_SBOX, SBOX)
    assert not is_inverse_pair(SBOX, SBOX)


def test_ddt_shape_and_rows():
    ddt = calculate_ddt(SBOX)
    assert ddt.shape == (8, 8)
    assert ddt[0, 0] == 8
    assert np.all(ddt[0, 1:] == 0)
    assert np.all(ddt.sum(axis=1) == 8)


def test_differential_uniformity():
    # every non-zero input difference maps to four output differences, twice each
    assert calculate_differential_uniformity(SBOX) == 2
    assert calculate_differential_uniformity(list(range(8))) == 8


def test_lat():
    lat = calculate_lat(SBOX)
    assert lat.shape == (8, 8)
    assert lat[0, 0] == 4
    assert np.all(lat[0, 1:] == 0)
    assert np.all(lat[1:, 0] == 0)
    assert lat[1, 1] == -2


def test_linear_bias():
    assert calculate_linear_bias(SBOX) == pytest.approx(0.5)
    assert calculate_linear_bias(list(range(8))) == pytest.approx(1.0)


def test_evaluate_sbox():
    metrics = evaluate_sbox(SBOX)
    assert metrics['size'] == 8
    assert metrics['differential'] == 2
    assert metrics['linear'] == pytest.approx(0.5)
    assert metrics['fixed_points'] == 2


def test_evaluate_rejects_non_permutation():
    with pytest.raises(ValueError):
        evaluate_sbox([0] * 8)


def test_avalanche_profile_reduced_rounds():
    # a single round confines each flipped bit to one 3-bit group
    cipher = TUBBlockCipher(num_rounds=1)
    profile = avalanche_profile(cipher, '0' * 27, '0' * 45)
    assert profile.shape == (27,)
    assert np.all(profile >= 1)
    assert np.all(profile <= 3)


def test_avalanche_full_cipher():
    rng = np.random.default_rng(30)
    key = BitBlock(rng.integers(0, 2, 2560))
    plaintext = BitBlock(rng.integers(0, 2, 27))

    ratio = avalanche_ratio(TUBBlockCipher(), plaintext, key)
    assert 0.3 < ratio < 0.7


def test_avalanche_matrix():
    rng = np.random.default_rng(31)
    key = BitBlock(rng.integers(0, 2, 2520))

    matrix = avalanche_matrix(TUBBlockCipher(), key, num_samples=8, seed=1)
    assert matrix.shape == (27, 27)
    assert np.all((matrix >= 0) & (matrix <= 1))
    assert 0.3 < matrix.mean() < 0.7

    again = avalanche_matrix(TUBBlockCipher(), key, num_samples=8, seed=1)
    assert np.array_equal(matrix, again)


def test_avalanche_matrix_needs_samples():
    with pytest.raises(ValueError):
        avalanche_matrix(TUBBlockCipher(), '0' * 2520, num_samples=0)


def test_avalanche_short_key():
    with pytest.raises(InsufficientKeyMaterialError):
        avalanche_profile(TUBBlockCipher(), '0' * 27, '0' * 2519)
