"""
Bit File Input/Output

This module reads and writes the flat bit files exchanged with the
cipher: a 27-character block file and a 2560-character extended key
file, one '0'/'1' character per bit. It also runs the build-directory
flow of decrypting build/ciphertext.txt with build/extendedKey.txt into
build/plaintext.txt, or the reverse for encryption.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..bits.bit_block import BitBlock, MalformedBlockError
from ..cipher_core.block_cipher import TUBBlockCipher
from ..cipher_core.layers import BLOCK_SIZE
from ..key_schedule.extended_key import NUM_ROUNDS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Default build layout
FILE_DEFAULT_PATHS = {
    'build_dir': 'build',
    'ciphertext': 'ciphertext.txt',
    'extended_key': 'extendedKey.txt',
    'plaintext': 'plaintext.txt',
}

BUILD_DIR_ENV = 'TUBCIPHER_BUILD_DIR'

MODES = ('decrypt', 'encrypt')


@dataclass
class BuildPaths:
    """Locations of the three files of a build directory."""
    ciphertext: Path
    extended_key: Path
    plaintext: Path


def resolve_build_paths(build_dir: Optional[PathLike] = None) -> BuildPaths:
    """
    Resolve the file locations of a build directory.

    Args:
        build_dir: Build directory; falls back to the TUBCIPHER_BUILD_DIR
            environment variable, then to ./build

    Returns:
        The ciphertext, extended key and plaintext paths
    """
    if build_dir is None:
        build_dir = os.environ.get(BUILD_DIR_ENV, FILE_DEFAULT_PATHS['build_dir'])
    base = Path(build_dir)

    return BuildPaths(
        ciphertext=base / FILE_DEFAULT_PATHS['ciphertext'],
        extended_key=base / FILE_DEFAULT_PATHS['extended_key'],
        plaintext=base / FILE_DEFAULT_PATHS['plaintext'],
    )


def read_bit_file(path: PathLike, num_bits: Optional[int] = None) -> BitBlock:
    """
    Read a file of '0'/'1' characters.

    Args:
        path: File to read
        num_bits: If given, only the first num_bits characters are used

    Returns:
        The bits held in the file

    Raises:
        MalformedBlockError: If the file holds other characters or fewer
            than num_bits bits
        OSError: If the file cannot be read
    """
    data = Path(path).read_bytes().strip()

    if num_bits is not None:
        if len(data) < num_bits:
            raise MalformedBlockError(
                f"{path} must hold at least {num_bits} bits, got {len(data)}")
        data = data[:num_bits]

    block = BitBlock.from_bytes(data)
    logger.debug(f"Read {len(block)} bits from {path}")
    return block


def write_bit_file(path: PathLike, block: BitBlock) -> None:
    """
    Write a block as '0'/'1' characters, without a trailing newline.

    Args:
        path: File to write
        block: The bits to store
    """
    Path(path).write_bytes(block.to_bytes())
    logger.debug(f"Wrote {len(block)} bits to {path}")


def decrypt_file(ciphertext_path: PathLike, key_path: PathLike, plaintext_path: PathLike,
                 num_rounds: int = NUM_ROUNDS) -> BitBlock:
    """
    Decrypt a ciphertext block file into a plaintext block file.

    Args:
        ciphertext_path: File holding the 27-bit ciphertext
        key_path: File holding the extended key
        plaintext_path: File to write the 27-bit plaintext to
        num_rounds: Number of rounds (default: 56)

    Returns:
        The decrypted plaintext block
    """
    ciphertext = read_bit_file(ciphertext_path, BLOCK_SIZE)
    key = read_bit_file(key_path)

    plaintext = TUBBlockCipher(num_rounds=num_rounds).decrypt_block(ciphertext, key)
    write_bit_file(plaintext_path, plaintext)

    logger.info(f"Decrypted {ciphertext_path} into {plaintext_path}")
    return plaintext


def encrypt_file(plaintext_path: PathLike, key_path: PathLike, ciphertext_path: PathLike,
                 num_rounds: int = NUM_ROUNDS) -> BitBlock:
    """
    Encrypt a plaintext block file into a ciphertext block file.

    Args:
        plaintext_path: File holding the 27-bit plaintext
        key_path: File holding the extended key
        ciphertext_path: File to write the 27-bit ciphertext to
        num_rounds: Number of rounds (default: 56)

    Returns:
        The encrypted ciphertext block
    """
    plaintext = read_bit_file(plaintext_path, BLOCK_SIZE)
    key = read_bit_file(key_path)

    ciphertext = TUBBlockCipher(num_rounds=num_rounds).encrypt_block(plaintext, key)
    write_bit_file(ciphertext_path, ciphertext)

    logger.info(f"Encrypted {plaintext_path} into {ciphertext_path}")
    return ciphertext


def process_build_dir(mode: str = 'decrypt', build_dir: Optional[PathLike] = None) -> BitBlock:
    """
    Run the cipher over the files of a build directory.

    In 'decrypt' mode ciphertext.txt is decrypted into plaintext.txt; in
    'encrypt' mode plaintext.txt is encrypted into ciphertext.txt. Both
    use extendedKey.txt.

    Args:
        mode: 'decrypt' or 'encrypt'
        build_dir: Build directory (see resolve_build_paths)

    Returns:
        The block written to the output file

    Raises:
        ValueError: If the mode is unknown
    """
    if mode not in MODES:
        raise ValueError(f"Mode must be one of {', '.join(MODES)}, got '{mode}'")

    paths = resolve_build_paths(build_dir)

    if mode == 'decrypt':
        return decrypt_file(paths.ciphertext, paths.extended_key, paths.plaintext)
    return encrypt_file(paths.plaintext, paths.extended_key, paths.ciphertext)
