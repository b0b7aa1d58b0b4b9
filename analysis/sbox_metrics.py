"""
S-box Metrics

This module evaluates substitution tables for the cryptographic
properties relevant to an SPN round, focusing on differential
uniformity and linear bias. It is used to check the cipher's fixed
3-bit S-box and its stored inverse.
"""

import logging
import numpy as np
from typing import Dict, Sequence

from ..cipher_core.layers import SBOX, INV_SBOX

logger = logging.getLogger(__name__)


def is_bijective(sbox: Sequence[int]) -> bool:
    """Check that the S-box is a permutation of 0..len(sbox)-1."""
    return sorted(int(v) for v in sbox) == list(range(len(sbox)))


def is_inverse_pair(sbox: Sequence[int], inv_sbox: Sequence[int]) -> bool:
    """
    Check that two tables undo each other in both directions.

    Args:
        sbox: The forward S-box
        inv_sbox: The candidate inverse S-box

    Returns:
        True if inv_sbox[sbox[v]] == v and sbox[inv_sbox[v]] == v for every v
    """
    if len(sbox) != len(inv_sbox):
        return False
    return all(int(inv_sbox[int(sbox[v])]) == v and int(sbox[int(inv_sbox[v])]) == v
               for v in range(len(sbox)))


def calculate_ddt(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the difference distribution table of an S-box.

    Entry [dx, dy] counts the inputs x with sbox[x] ^ sbox[x ^ dx] == dy.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The DDT as a square integer array
    """
    table = np.asarray(sbox, dtype=np.int64)
    size = len(table)
    inputs = np.arange(size)

    ddt = np.zeros((size, size), dtype=np.int32)
    for dx in range(size):
        dy = table[inputs] ^ table[inputs ^ dx]
        values, counts = np.unique(dy, return_counts=True)
        ddt[dx, values] = counts

    return ddt


def calculate_differential_uniformity(sbox: Sequence[int]) -> int:
    """
    Calculate the differential uniformity of an S-box.

    Lower values indicate better resistance to differential cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest DDT entry over non-zero input differences
    """
    ddt = calculate_ddt(sbox)
    return int(np.max(ddt[1:, :]))


def _parity(values: np.ndarray) -> np.ndarray:
    result = np.zeros_like(values)
    remaining = values.copy()
    while np.any(remaining):
        result ^= remaining & 1
        remaining >>= 1
    return result


def calculate_lat(sbox: Sequence[int]) -> np.ndarray:
    """
    Build the linear approximation table of an S-box.

    Entry [a, b] is the number of inputs x for which the parity of x & a
    equals the parity of sbox[x] & b, minus half the table size, so an
    unbiased approximation scores 0.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The LAT as a square integer array
    """
    table = np.asarray(sbox, dtype=np.int64)
    size = len(table)
    inputs = np.arange(size)

    lat = np.zeros((size, size), dtype=np.int32)
    for input_mask in range(size):
        input_parity = _parity(inputs & input_mask)
        for output_mask in range(size):
            output_parity = _parity(table & output_mask)
            lat[input_mask, output_mask] = np.count_nonzero(input_parity == output_parity) - size // 2

    return lat


def calculate_linear_bias(sbox: Sequence[int]) -> float:
    """
    Calculate the linear bias of an S-box.

    Lower values indicate better resistance to linear cryptanalysis.

    Args:
        sbox: The S-box to evaluate

    Returns:
        The largest absolute LAT entry over non-zero masks, normalised to [0, 1]
    """
    lat = calculate_lat(sbox)
    size = len(lat)
    return float(np.max(np.abs(lat[1:, 1:]))) / (size // 2)


def evaluate_sbox(sbox: Sequence[int]) -> Dict[str, float]:
    """
    Evaluate an S-box for cryptographic properties.

    Args:
        sbox: The S-box to evaluate

    Returns:
        A dictionary of scores (lower is better for differential and linear)
    """
    if not is_bijective(sbox):
        raise ValueError("S-box must be a permutation of its input values")

    metrics = {
        'size': len(sbox),
        'differential': calculate_differential_uniformity(sbox),
        'linear': calculate_linear_bias(sbox),
        'fixed_points': sum(1 for v in range(len(sbox)) if int(sbox[v]) == v),
    }
    logger.info(f"S-box of size {metrics['size']}: differential uniformity "
                f"{metrics['differential']}, linear bias {metrics['linear']:.3f}")
    return metrics


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    metrics = evaluate_sbox(SBOX)

    print(f"Inverse table matches: {is_inverse_pair(SBOX, INV_SBOX)}")
    print(f"Differential uniformity: {metrics['differential']}")
    print(f"Linear bias: {metrics['linear']}")
    print(f"Fixed points: {metrics['fixed_points']}")
