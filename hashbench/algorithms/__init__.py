"""
HashBench Algorithms
=====================

Hash function providers (one per algorithm) and the dispatcher that
selects among them.
"""

from hashbench.algorithms.dispatcher import AlgorithmDispatcher
from hashbench.algorithms.digest import compute_digest
from hashbench.algorithms.adaptive import compute_argon2id, compute_bcrypt

__all__ = [
    "AlgorithmDispatcher",
    "compute_digest",
    "compute_argon2id",
    "compute_bcrypt",
]
