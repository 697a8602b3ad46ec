"""
RotorCore Shared Module
========================

Configuration, logging and console infrastructure shared by the RotorCore
tools.
"""

from shared.config import RotorConfig, get_config

__all__ = ["RotorConfig", "get_config"]
