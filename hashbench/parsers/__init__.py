"""
HashBench Parsers
==================

Input parsing utilities: salt text resolution and lenient parameter
parsing for the adaptive hashing schemes.
"""

from hashbench.parsers.salt import SaltResolver
from hashbench.parsers.params import (
    Argon2Parameters,
    argon2_variant_from_text,
    clamp_bcrypt_cost,
    parse_int,
)

__all__ = [
    "SaltResolver",
    "Argon2Parameters",
    "argon2_variant_from_text",
    "clamp_bcrypt_cost",
    "parse_int",
]
