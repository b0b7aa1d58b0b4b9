"""
Round Function

A single TUBCipher round. Encryption mixes in the big key, applies the
fixed permutation, the keyed permutation and the substitution;
decryption undoes the same steps in reverse order.
"""

from ..bits.bit_block import BitBlock
from .layers import mix, permute_fixed, permute_keyed, substitute


def encrypt_round(block: BitBlock, big_key: BitBlock, small_key: BitBlock) -> BitBlock:
    """
    Apply one encryption round to a 27-bit block.

    Args:
        block: The 27-bit round input
        big_key: 27-bit key for the mixing step
        small_key: 18-bit key for the keyed permutation

    Returns:
        The 27-bit round output
    """
    state = mix(block, big_key)
    state = permute_fixed(state)
    state = permute_keyed(state, small_key)
    return substitute(state)


def decrypt_round(block: BitBlock, big_key: BitBlock, small_key: BitBlock) -> BitBlock:
    """
    Undo one encryption round made with the same key pair.

    Args:
        block: The 27-bit round output to invert
        big_key: 27-bit key used for mixing
        small_key: 18-bit key used for the keyed permutation

    Returns:
        The 27-bit round input
    """
    state = substitute(block, inverse=True)
    state = permute_keyed(state, small_key)
    state = permute_fixed(state, inverse=True)
    return mix(state, big_key)
