"""
HashBench Shared Module
=======================

Configuration, structured logging and console presentation shared by
the HashBench engine and its command-line interface.
"""

from shared.config import AppConfig, get_config

__all__ = ["AppConfig", "get_config"]
