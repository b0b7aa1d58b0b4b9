"""
Round Layers

This module implements the four layers of a TUBCipher round on 27-bit
blocks: key mixing, the fixed bit permutation, the keyed permutation of
3-bit groups and the 3-bit substitution. All fixed behaviour is held in
lookup tables so the layers can be checked exhaustively.
"""

import numpy as np
from typing import List

from ..bits.bit_block import BitBlock

BLOCK_SIZE = 27
GROUP_SIZE = 3
NUM_GROUPS = BLOCK_SIZE // GROUP_SIZE

# 3-bit substitution, group read with its first bit most significant
SBOX = np.array([0, 1, 3, 6, 7, 4, 5, 2], dtype=np.uint8)
INV_SBOX = np.array([0, 1, 7, 2, 5, 6, 3, 4], dtype=np.uint8)

# Bit at position i moves to FIXED_PERM[i]; position 26 is a fixed point
FIXED_PERM = np.array([(3 * i) % 26 for i in range(26)] + [26], dtype=np.intp)

# Group orderings indexed by the 2-bit selector; each one is an involution
KEYED_ORDERS = np.array([
    [0, 1, 2],  # 00: identity
    [1, 0, 2],  # 01: swap first two
    [0, 2, 1],  # 10: swap last two
    [2, 1, 0],  # 11: reverse
], dtype=np.intp)

_GROUP_WEIGHTS = np.array([4, 2, 1], dtype=np.intp)
_GROUP_SHIFTS = np.array([2, 1, 0], dtype=np.uint8)
_SELECTOR_WEIGHTS = np.array([2, 1], dtype=np.intp)


def create_inverse_permutation(perm_table: np.ndarray) -> np.ndarray:
    """
    Create the inverse of a permutation table.

    Args:
        perm_table: The forward permutation table

    Returns:
        Array containing the inverse permutation
    """
    inv_perm = np.zeros(len(perm_table), dtype=np.intp)
    for i, val in enumerate(perm_table):
        inv_perm[val] = i
    return inv_perm


INV_FIXED_PERM = create_inverse_permutation(FIXED_PERM)


def mix(block: BitBlock, key: BitBlock) -> BitBlock:
    """
    XOR the block with a key of the same length.

    Applying the same key twice restores the block.
    """
    return block ^ key


def permute_fixed(block: BitBlock, inverse: bool = False) -> BitBlock:
    """
    Apply the keyless bit permutation to a 27-bit block.

    Args:
        block: The current state
        inverse: Whether to use the inverse permutation (for decryption)

    Returns:
        The state after permutation
    """
    # Gathering through the inverse table sends bit i to FIXED_PERM[i].
    perm_table = FIXED_PERM if inverse else INV_FIXED_PERM
    return BitBlock._wrap(block.bits[perm_table])


def selectors(small_key: BitBlock) -> np.ndarray:
    """Read the nine 2-bit group selectors from an 18-bit small key."""
    return small_key.bits.reshape(NUM_GROUPS, 2) @ _SELECTOR_WEIGHTS


def permute_keyed(block: BitBlock, small_key: BitBlock) -> BitBlock:
    """
    Rearrange each 3-bit group according to its key selector.

    Every ordering is its own inverse, so decryption calls this
    function with the same small key.

    Args:
        block: The current state
        small_key: 18-bit key holding two selector bits per group

    Returns:
        The state after the keyed permutation
    """
    groups = block.bits.reshape(NUM_GROUPS, GROUP_SIZE)
    orders = KEYED_ORDERS[selectors(small_key)]
    return BitBlock._wrap(np.take_along_axis(groups, orders, axis=1).reshape(-1))


def group_values(block: BitBlock) -> List[int]:
    """Return the integer value of each 3-bit group, first bit most significant."""
    return [int(v) for v in block.bits.reshape(NUM_GROUPS, GROUP_SIZE) @ _GROUP_WEIGHTS]


def substitute(block: BitBlock, inverse: bool = False) -> BitBlock:
    """
    Apply the S-box substitution to each 3-bit group of the state.

    Args:
        block: The current state
        inverse: Whether to use the inverse S-box (for decryption)

    Returns:
        The state after substitution
    """
    sbox_table = INV_SBOX if inverse else SBOX
    values = block.bits.reshape(NUM_GROUPS, GROUP_SIZE) @ _GROUP_WEIGHTS
    substituted = sbox_table[values]
    bits = (substituted[:, np.newaxis] >> _GROUP_SHIFTS) & np.uint8(1)
    return BitBlock._wrap(bits.reshape(-1))
