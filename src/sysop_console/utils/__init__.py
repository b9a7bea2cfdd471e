"""
Utility modules for SysOp Console.
"""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
