"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for limbs, magnitude engines, BigInt,
                         string conversion and domain models
"""
