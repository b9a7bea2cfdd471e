"""
Collection stores for SysOp Console.
"""

from .collection_store import CollectionStore, JsonCollectionStore

__all__ = ["CollectionStore", "JsonCollectionStore"]
