"""
Screen objects held on the editor controller's stack.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .catalog import Item
from .fields import TypedField
from .session import CollectionSpec, EditSession


@dataclass
class Screen:
    """Base screen: an id unique on the stack, a title and a cursor."""
    id: str
    title: str
    cursor: int = 0


@dataclass
class RootScreen(Screen):
    """Top-level category bar."""
    pass


@dataclass
class CatalogScreen(Screen):
    """Items of a category or section."""
    items: Tuple[Item, ...] = ()


@dataclass
class DirectoryScreen(Screen):
    """Keys of the collections under a prefix, e.g. the list of menus."""
    prefix: str = ""
    spec_for: Optional[Callable[[str], CollectionSpec]] = None
    # Key awaiting a second delete to confirm its removal
    confirm_delete: Optional[str] = None


@dataclass
class CollectionScreen(Screen):
    """One ordered collection being edited through a session."""
    session: Optional[EditSession] = None


@dataclass
class FieldPrompt:
    """Single-value edit prompt open over the current screen."""
    field: TypedField
    text: str
    error: str = ""
