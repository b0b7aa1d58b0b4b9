"""
Cipher Core Package

This package implements the core components of the 27-bit block cipher,
including the round layers, the round function and the 56-round
encryption/decryption driver.
"""

from .layers import BLOCK_SIZE, SBOX, INV_SBOX, FIXED_PERM, INV_FIXED_PERM, KEYED_ORDERS
from .round_function import encrypt_round, decrypt_round
from .block_cipher import TUBBlockCipher, encrypt_block, decrypt_block, encrypt, decrypt

__all__ = [
    'BLOCK_SIZE', 'SBOX', 'INV_SBOX', 'FIXED_PERM', 'INV_FIXED_PERM', 'KEYED_ORDERS',
    'encrypt_round', 'decrypt_round',
    'TUBBlockCipher', 'encrypt_block', 'decrypt_block', 'encrypt', 'decrypt',
]
