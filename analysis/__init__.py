"""
Cipher Analysis Package

This package implements diagnostics for the cipher: cryptographic
metrics of the substitution table and avalanche measurements of the
full 56-round cipher.
"""

from .sbox_metrics import (
    evaluate_sbox, calculate_ddt, calculate_lat,
    calculate_differential_uniformity, calculate_linear_bias,
    is_bijective, is_inverse_pair,
)
from .avalanche import avalanche_profile, avalanche_ratio, avalanche_matrix

__all__ = [
    'evaluate_sbox', 'calculate_ddt', 'calculate_lat',
    'calculate_differential_uniformity', 'calculate_linear_bias',
    'is_bijective', 'is_inverse_pair',
    'avalanche_profile', 'avalanche_ratio', 'avalanche_matrix',
]
