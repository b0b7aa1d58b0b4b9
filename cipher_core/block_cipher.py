"""
Block Cipher Implementation

This module provides the core implementation of the TUBBlockCipher,
a Substitution-Permutation Network (SPN) based symmetric block cipher
with a 27-bit block size and 56 rounds keyed by a 2560-bit extended key.
"""

import logging
from typing import List, Sequence, Union

from ..bits.bit_block import BitBlock, MalformedBlockError, as_bit_block
from ..key_schedule.extended_key import NUM_ROUNDS, RoundKeyPair, split_round_keys
from .layers import BLOCK_SIZE
from .round_function import encrypt_round, decrypt_round

logger = logging.getLogger(__name__)

BlockLike = Union[BitBlock, str, bytes, Sequence[int]]


class TUBBlockCipher:
    """
    TUBCipher implementation using an SPN (Substitution-Permutation Network)
    with a 27-bit block size and configurable number of rounds.

    The cipher holds no key state; every call receives its own block and
    extended key.
    """

    def __init__(self, num_rounds: int = NUM_ROUNDS):
        """
        Initialize the block cipher.

        Args:
            num_rounds: Number of SPN rounds (default: 56)
        """
        if num_rounds < 1:
            raise ValueError(f"Number of rounds must be positive, got {num_rounds}")

        self.block_size = BLOCK_SIZE
        self.num_rounds = num_rounds

    def _check_block(self, block: BlockLike, name: str) -> BitBlock:
        block = as_bit_block(block)
        if len(block) != self.block_size:
            raise MalformedBlockError(
                f"{name} must be exactly {self.block_size} bits, got {len(block)}")
        return block

    def round_keys(self, key: BlockLike) -> List[RoundKeyPair]:
        """
        Slice the extended key into the key pairs of every round.

        Raises:
            InsufficientKeyMaterialError: If the key is too short for num_rounds
        """
        return split_round_keys(key, self.num_rounds)

    def encrypt_round(self, block: BitBlock, big_key: BitBlock, small_key: BitBlock) -> BitBlock:
        """Apply a single encryption round."""
        return encrypt_round(block, big_key, small_key)

    def decrypt_round(self, block: BitBlock, big_key: BitBlock, small_key: BitBlock) -> BitBlock:
        """Apply a single decryption round."""
        return decrypt_round(block, big_key, small_key)

    def encrypt_block(self, plaintext: BlockLike, key: BlockLike) -> BitBlock:
        """
        Encrypt a single 27-bit block.

        Args:
            plaintext: The plaintext block to encrypt (must be 27 bits)
            key: The extended key (at least 45 bits per round)

        Returns:
            The encrypted ciphertext block

        Raises:
            MalformedBlockError: If the plaintext is not a 27-bit block
            InsufficientKeyMaterialError: If the key is too short
        """
        state = self._check_block(plaintext, "Plaintext")
        round_keys = self.round_keys(key)

        logger.debug(f"Encrypting block over {self.num_rounds} rounds")

        for round_index in range(self.num_rounds):
            pair = round_keys[round_index]
            state = encrypt_round(state, pair.big_key, pair.small_key)

        return state

    def decrypt_block(self, ciphertext: BlockLike, key: BlockLike) -> BitBlock:
        """
        Decrypt a single 27-bit block.

        Args:
            ciphertext: The ciphertext block to decrypt (must be 27 bits)
            key: The extended key used for encryption

        Returns:
            The decrypted plaintext block

        Raises:
            MalformedBlockError: If the ciphertext is not a 27-bit block
            InsufficientKeyMaterialError: If the key is too short
        """
        state = self._check_block(ciphertext, "Ciphertext")
        round_keys = self.round_keys(key)

        logger.debug(f"Decrypting block over {self.num_rounds} rounds")

        # Rounds are undone last to first
        for round_index in range(self.num_rounds - 1, -1, -1):
            pair = round_keys[round_index]
            state = decrypt_round(state, pair.big_key, pair.small_key)

        return state


def encrypt_block(plaintext: BlockLike, key: BlockLike,
                  num_rounds: int = NUM_ROUNDS) -> BitBlock:
    """
    Convenience function to encrypt a single block.

    Args:
        plaintext: The plaintext block to encrypt
        key: The extended key
        num_rounds: Number of rounds (default: 56)

    Returns:
        The encrypted ciphertext block
    """
    cipher = TUBBlockCipher(num_rounds=num_rounds)
    return cipher.encrypt_block(plaintext, key)


def decrypt_block(ciphertext: BlockLike, key: BlockLike,
                  num_rounds: int = NUM_ROUNDS) -> BitBlock:
    """
    Convenience function to decrypt a single block.

    Args:
        ciphertext: The ciphertext block to decrypt
        key: The extended key
        num_rounds: Number of rounds (default: 56)

    Returns:
        The decrypted plaintext block
    """
    cipher = TUBBlockCipher(num_rounds=num_rounds)
    return cipher.decrypt_block(ciphertext, key)


def encrypt(plaintext: str, key: str) -> str:
    """
    Encrypt a 27-character '0'/'1' block with a '0'/'1' extended key.

    Returns:
        The 27-character ciphertext
    """
    return encrypt_block(plaintext, key).to_string()


def decrypt(ciphertext: str, key: str) -> str:
    """
    Decrypt a 27-character '0'/'1' block with a '0'/'1' extended key.

    Returns:
        The 27-character plaintext
    """
    return decrypt_block(ciphertext, key).to_string()
