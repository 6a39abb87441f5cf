"""
HashBench Module Entry Point
=============================

Allows running the HashBench CLI via: python -m hashbench
"""

from hashbench.cli import main

if __name__ == "__main__":
    main()
