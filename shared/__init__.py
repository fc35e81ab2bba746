"""
Rampart Shared Module
======================

Configuration, structured logging, console presentation and result
models shared by the Rampart engine and CLI.
"""

from shared.config import RampartConfig, get_config

__all__ = ["RampartConfig", "get_config"]
