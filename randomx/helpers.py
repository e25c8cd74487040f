"""Bit-level helpers for building floating point register values."""

from randomx.parameters import (
    FLOAT_EXPONENT_MASK,
    FLOAT_MANTISSA_MASK,
    FLOAT_MANTISSA_SIZE,
    RANDOMX_CONST_EXPONENT_BITS,
    RANDOMX_DYNAMIC_EXPONENT_BITS,
    RANDOMX_STATIC_EXPONENT_BITS,
)

_U64_LIMIT = 1 << 64


def _check_u64(v: int) -> int:
    if not 0 <= v < _U64_LIMIT:
        raise ValueError(f"value {v} does not fit in an unsigned 64-bit integer")
    return v


def f64_from_u64(v: int) -> int:
    """Return the bit pattern of the double built from an initialisation quadword.

    Bits 0-51 are the mantissa, bits 59-63 the exponent (0 to 31); bits
    52-58 are ignored.
    """
    _check_u64(v)
    exponent = ((v >> 59) + (1 << 10) - 1) & FLOAT_EXPONENT_MASK
    return (exponent << FLOAT_MANTISSA_SIZE) | (v & FLOAT_MANTISSA_MASK)


def static_exponent(v: int) -> int:
    """Return the exponent bits, in position, taken from the top bits of ``v``."""
    _check_u64(v)
    exponent = RANDOMX_CONST_EXPONENT_BITS | (
        (v >> (64 - RANDOMX_STATIC_EXPONENT_BITS)) << RANDOMX_DYNAMIC_EXPONENT_BITS
    )
    return exponent << FLOAT_MANTISSA_SIZE


def float_mask(v: int) -> int:
    """Return the E-register mask derived from ``v``."""
    _check_u64(v)
    return (v & ((1 << 22) - 1)) | static_exponent(v)