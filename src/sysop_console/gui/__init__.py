"""
Qt adapters for SysOp Console.
"""

from .projection_model import ProjectionListModel, RowRole

__all__ = ["ProjectionListModel", "RowRole"]
