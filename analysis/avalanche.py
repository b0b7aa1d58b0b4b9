"""
Avalanche Diagnostics

Measures how far a single flipped plaintext bit spreads through the
full cipher. After 56 rounds roughly half of the output bits are
expected to change; this is an empirical sanity check of the diffusion
layers, not a security claim.
"""

import logging
import numpy as np
from typing import Optional

from ..bits.bit_block import BitBlock, as_bit_block
from ..cipher_core.block_cipher import BlockLike, TUBBlockCipher

logger = logging.getLogger(__name__)


def flip_bit(block: BitBlock, position: int) -> BitBlock:
    """Return a copy of the block with one bit inverted."""
    bits = block.bits.copy()
    bits[position] ^= 1
    return BitBlock._wrap(bits)


def avalanche_profile(cipher: TUBBlockCipher, plaintext: BlockLike, key: BlockLike) -> np.ndarray:
    """
    Count changed ciphertext bits for every single-bit plaintext change.

    Args:
        cipher: The cipher instance to measure
        plaintext: Reference plaintext block
        key: Extended key

    Returns:
        Array of length block_size; entry i is the Hamming distance between
        the reference ciphertext and the ciphertext with plaintext bit i flipped
    """
    plaintext = as_bit_block(plaintext)
    reference = cipher.encrypt_block(plaintext, key)
    distances = np.zeros(cipher.block_size, dtype=np.int64)
    for position in range(cipher.block_size):
        flipped = cipher.encrypt_block(flip_bit(plaintext, position), key)
        distances[position] = reference.hamming_distance(flipped)

    return distances


def avalanche_ratio(cipher: TUBBlockCipher, plaintext: BlockLike, key: BlockLike) -> float:
    """
    Mean fraction of ciphertext bits changed by a single plaintext bit flip.

    Returns:
        A value in [0, 1]; close to 0.5 indicates good diffusion
    """
    distances = avalanche_profile(cipher, plaintext, key)
    ratio = float(np.mean(distances)) / cipher.block_size
    logger.info(f"Avalanche ratio over {cipher.num_rounds} rounds: {ratio:.3f}")
    return ratio


def avalanche_matrix(cipher: TUBBlockCipher, key: BlockLike,
                     num_samples: int = 64, seed: Optional[int] = None) -> np.ndarray:
    """
    Estimate the strict avalanche criterion matrix over random plaintexts.

    Args:
        cipher: The cipher instance to measure
        key: Extended key
        num_samples: Number of random plaintexts to average over
        seed: Optional seed for reproducible plaintexts

    Returns:
        block_size x block_size array; entry [i, j] is the observed probability
        that output bit j changes when input bit i is flipped
    """
    if num_samples < 1:
        raise ValueError("Number of samples must be positive")

    rng = np.random.default_rng(seed)
    size = cipher.block_size
    flips = np.zeros((size, size), dtype=np.int64)

    for _ in range(num_samples):
        plaintext = BitBlock(rng.integers(0, 2, size=size, dtype=np.uint8))
        reference = cipher.encrypt_block(plaintext, key).bits
        for position in range(size):
            flipped = cipher.encrypt_block(flip_bit(plaintext, position), key).bits
            flips[position] += reference != flipped

    logger.info(f"Collected avalanche matrix from {num_samples} plaintexts")
    return flips / num_samples
