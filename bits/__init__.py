"""
Bit Sequence Package

This package implements the immutable fixed-length bit container shared
by the cipher core, the key schedule and the file collaborator.
"""

from .bit_block import BitBlock, MalformedBlockError, as_bit_block

__all__ = ['BitBlock', 'MalformedBlockError', 'as_bit_block']
