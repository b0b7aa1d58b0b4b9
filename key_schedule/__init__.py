"""
Key Schedule Package

This package slices the 2560-bit extended key into the 56 per-round
key pairs used by the block cipher.
"""

from .extended_key import (
    RoundKeyPair, InsufficientKeyMaterialError, split_round_keys,
    round_key_pair, required_key_bits, generate_extended_key,
    NUM_ROUNDS, REQUIRED_KEY_SIZE, EXTENDED_KEY_SIZE,
)

__all__ = [
    'RoundKeyPair', 'InsufficientKeyMaterialError', 'split_round_keys',
    'round_key_pair', 'required_key_bits', 'generate_extended_key',
    'NUM_ROUNDS', 'REQUIRED_KEY_SIZE', 'EXTENDED_KEY_SIZE',
]
