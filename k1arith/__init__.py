"""Limb-level secp256k1 field arithmetic, integer helpers, test randomness and timing."""

__version__ = "0.1.0"

__all__ = ["bench", "field", "fieldmul", "fieldsqr", "num", "testrand"]