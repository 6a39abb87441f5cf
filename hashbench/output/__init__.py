"""
HashBench Output Module
========================

Console display for benchmark results.
"""

from hashbench.output.console import BenchConsoleOutput

__all__ = ["BenchConsoleOutput"]
