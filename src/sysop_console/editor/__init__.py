"""
Configuration tree editor.

The controller lives in sysop_console.editor.controller and the default
catalog in sysop_console.editor.declarations.
"""

from .fields import FieldValue, TypedField, ValueKind, format_value, parse_value
from .catalog import Category, FieldCatalog, Item, ItemKind, action, editable, section
from .projection import Row, project_categories, project_entries, project_items, project_keys
from .session import CollectionSpec, EditSession, Idle, InsertArmed, MoveArmed

__all__ = [
    "FieldValue",
    "TypedField",
    "ValueKind",
    "format_value",
    "parse_value",
    "Category",
    "FieldCatalog",
    "Item",
    "ItemKind",
    "action",
    "editable",
    "section",
    "Row",
    "project_categories",
    "project_entries",
    "project_items",
    "project_keys",
    "CollectionSpec",
    "EditSession",
    "Idle",
    "InsertArmed",
    "MoveArmed",
]
