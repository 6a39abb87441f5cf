"""
HashBench -- Multi-Algorithm Hashing Benchmark
===============================================

Computes SHA-256, SHA-512, MD5, BCrypt and Argon2id outputs for a text
input and an optional salt, together with a reproducible average
execution time.

Modules:
    - hashbench.core.engine: Execution coordinator (worker thread, busy state)
    - hashbench.core.models: Pydantic data models
    - hashbench.core.timing: Repeated-trial timing harness
    - hashbench.algorithms: Hash providers and the algorithm dispatcher
    - hashbench.parsers: Salt and parameter parsing
    - hashbench.output: Console output
    - hashbench.cli: Click-based command-line interface

References:
    - NIST FIPS 180-4 (2015). Secure Hash Standard (SHS).
    - RFC 9106 (2021). Argon2 Memory-Hard Function for Password Hashing.
    - OWASP Password Storage Cheat Sheet (2023).
"""

__version__ = "1.0.0"
__tool_name__ = "hashbench"
