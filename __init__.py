"""
TUBCipher - 27-bit Substitution-Permutation Network Block Cipher

This library implements the TUBCipher, a symmetric block cipher operating
on 27-bit blocks with a 56-round SPN structure driven by a 2560-bit
extended key.

Key Features:
- 27-bit block size, nine 3-bit groups per block
- 56 rounds of key mixing, fixed permutation, keyed permutation
  and substitution
- Table-driven layers with stored inverse tables
- Bits exchanged as '0'/'1' characters for interoperability
  with flat key/plaintext/ciphertext files
- S-box metrics and avalanche diagnostics

"""

__version__ = '0.1.0'
__author__ = 'TUBCipher Team'
