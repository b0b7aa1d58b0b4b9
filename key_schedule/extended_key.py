"""
Extended Key Schedule

This module slices the caller-supplied extended key into the per-round
key pairs consumed by the cipher. Round i uses the 45 bits starting at
45 * i: a 27-bit big key for key mixing followed by an 18-bit small key
for the keyed permutation.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import List, Union

import numpy as np

from ..bits.bit_block import BitBlock, as_bit_block

logger = logging.getLogger(__name__)

NUM_ROUNDS = 56
BIG_KEY_SIZE = 27
SMALL_KEY_SIZE = 18
ROUND_KEY_SIZE = BIG_KEY_SIZE + SMALL_KEY_SIZE
REQUIRED_KEY_SIZE = NUM_ROUNDS * ROUND_KEY_SIZE  # 2520 bits

# Size of the extended key buffer; bits past REQUIRED_KEY_SIZE are never read
EXTENDED_KEY_SIZE = 2560


class InsufficientKeyMaterialError(ValueError):
    """Raised when an extended key is too short for the requested rounds."""


@dataclass(frozen=True)
class RoundKeyPair:
    """Key material consumed by a single round."""
    big_key: BitBlock
    small_key: BitBlock


def required_key_bits(num_rounds: int = NUM_ROUNDS) -> int:
    """Number of extended key bits consumed by `num_rounds` rounds."""
    return num_rounds * ROUND_KEY_SIZE


def round_key_pair(extended_key: BitBlock, round_index: int) -> RoundKeyPair:
    """
    Slice the key pair of a single round out of the extended key.

    Args:
        extended_key: Validated extended key
        round_index: Zero-based round number

    Returns:
        The (big key, small key) pair for the round
    """
    offset = round_index * ROUND_KEY_SIZE
    return RoundKeyPair(
        big_key=extended_key[offset:offset + BIG_KEY_SIZE],
        small_key=extended_key[offset + BIG_KEY_SIZE:offset + ROUND_KEY_SIZE],
    )


def split_round_keys(extended_key: Union[BitBlock, str, bytes],
                     num_rounds: int = NUM_ROUNDS) -> List[RoundKeyPair]:
    """
    Split an extended key into one key pair per round.

    Args:
        extended_key: The extended key as BitBlock, '0'/'1' string or ASCII bytes
        num_rounds: Number of rounds to produce key pairs for

    Returns:
        A list of `num_rounds` RoundKeyPairs, ordered by round index

    Raises:
        InsufficientKeyMaterialError: If the key holds fewer than 45 * num_rounds bits
        MalformedBlockError: If the key contains anything but bits
    """
    key = as_bit_block(extended_key)
    required = required_key_bits(num_rounds)

    if len(key) < required:
        raise InsufficientKeyMaterialError(
            f"Extended key must hold at least {required} bits, got {len(key)}")

    if len(key) > required:
        logger.debug(f"Ignoring {len(key) - required} trailing extended key bits")

    return [round_key_pair(key, round_index) for round_index in range(num_rounds)]


def generate_extended_key(num_bits: int = EXTENDED_KEY_SIZE) -> BitBlock:
    """
    Generate random extended key material.

    Args:
        num_bits: Size of the key in bits (default: 2560)

    Returns:
        A random extended key

    Raises:
        ValueError: If num_bits is below the bits consumed by a full cipher
    """
    if num_bits < REQUIRED_KEY_SIZE:
        raise ValueError(f"Extended key must be at least {REQUIRED_KEY_SIZE} bits")

    raw = np.frombuffer(secrets.token_bytes((num_bits + 7) // 8), dtype=np.uint8)
    bits = np.unpackbits(raw)[:num_bits]
    return BitBlock(bits)


if __name__ == "__main__":
    key = generate_extended_key()
    round_keys = split_round_keys(key)

    assert len(round_keys) == NUM_ROUNDS, f"Expected {NUM_ROUNDS} round keys, got {len(round_keys)}"
    for i, pair in enumerate(round_keys):
        assert len(pair.big_key) == BIG_KEY_SIZE, f"Round {i} big key has length {len(pair.big_key)}"
        assert len(pair.small_key) == SMALL_KEY_SIZE, f"Round {i} small key has length {len(pair.small_key)}"

    print(f"Round 0 big key:   {round_keys[0].big_key}")
    print(f"Round 0 small key: {round_keys[0].small_key}")
    print("Key schedule test passed!")
