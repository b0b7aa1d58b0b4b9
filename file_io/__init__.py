"""
Bit File Package

This package implements the flat-file collaborator of the cipher:
reading and writing '0'/'1' bit files and running a build directory
through encryption or decryption.
"""

from .bit_files import (
    read_bit_file, write_bit_file, decrypt_file, encrypt_file,
    process_build_dir, resolve_build_paths, BuildPaths, FILE_DEFAULT_PATHS,
)

__all__ = [
    'read_bit_file', 'write_bit_file', 'decrypt_file', 'encrypt_file',
    'process_build_dir', 'resolve_build_paths', 'BuildPaths', 'FILE_DEFAULT_PATHS',
]
