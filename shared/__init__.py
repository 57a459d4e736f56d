"""
PassForge Shared Module
=======================

Configuration, logging and console infrastructure shared by the
PassForge library and its command-line interface.
"""

from shared.config import ForgeConfig, get_config

__all__ = ["ForgeConfig", "get_config"]
