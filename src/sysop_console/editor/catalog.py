"""
Field catalog: the immutable category/item hierarchy the editor navigates.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..errors import CatalogError
from .fields import TypedField

logger = logging.getLogger(__name__)


class ItemKind(Enum):
    """Kinds of catalog entries."""
    SECTION = "section"
    ACTION = "action"
    FIELD = "field"


@dataclass(frozen=True)
class Item:
    """One entry in a category or section."""
    id: str
    label: str
    kind: ItemKind
    children: Tuple["Item", ...] = ()
    field: Optional[TypedField] = None
    help_text: str = ""
    target: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is ItemKind.FIELD and self.field is None:
            raise CatalogError(f"Editable item '{self.id}' has no field")
        if self.kind is not ItemKind.FIELD and self.field is not None:
            raise CatalogError(f"Item '{self.id}' binds a field but is a {self.kind.value}")
        if self.kind is not ItemKind.SECTION and self.children:
            raise CatalogError(f"Only sections have children: '{self.id}'")
        if self.kind is ItemKind.ACTION and not self.target:
            raise CatalogError(f"Action '{self.id}' has no target")


def section(item_id: str, label: str, children: Sequence[Item], help_text: str = "") -> Item:
    """Declare a section header over child items."""
    return Item(item_id, label, ItemKind.SECTION, children=tuple(children), help_text=help_text)


def action(item_id: str, label: str, target: str, help_text: str = "") -> Item:
    """Declare an action item that opens another editor."""
    return Item(item_id, label, ItemKind.ACTION, help_text=help_text, target=target)


def editable(field: TypedField) -> Item:
    """Declare an editable item bound to a field."""
    return Item(field.identifier, field.label, ItemKind.FIELD, field=field, help_text=field.help_text)


@dataclass(frozen=True)
class Category:
    """Top-level group reachable by hotkey."""
    id: str
    label: str
    hotkey: str
    items: Tuple[Item, ...] = ()


class FieldCatalog:
    """
    Immutable catalog of categories built once from a static declaration.

    Building verifies id and hotkey uniqueness and reads every field once so
    kind disagreements surface before any editing starts.
    """

    def __init__(self, categories: Sequence[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._by_id: Dict[str, Category] = {}
        self._by_hotkey: Dict[str, Category] = {}
        self._items: Dict[str, Item] = {}

        for category in self._categories:
            if category.id in self._by_id:
                raise CatalogError(f"Duplicate category id '{category.id}'")
            hotkey = category.hotkey.upper()
            if hotkey in self._by_hotkey:
                raise CatalogError(
                    f"Hotkey '{hotkey}' used by both '{self._by_hotkey[hotkey].id}' and '{category.id}'"
                )
            self._by_id[category.id] = category
            self._by_hotkey[hotkey] = category
            for item in self._walk(category.items):
                if item.id in self._items:
                    raise CatalogError(f"Duplicate item id '{item.id}'")
                self._items[item.id] = item

        # Raises TypeMismatch on the first misdeclared field
        for field in self.fields():
            field.read()

        logger.debug(
            f"Catalog built: {len(self._categories)} categories, {len(self._items)} items"
        )

    @staticmethod
    def _walk(items: Sequence[Item]) -> Iterator[Item]:
        for item in items:
            yield item
            yield from FieldCatalog._walk(item.children)

    @property
    def categories(self) -> Tuple[Category, ...]:
        """Categories in declaration order."""
        return self._categories

    def category(self, category_id: str) -> Category:
        """Look up a category by id."""
        try:
            return self._by_id[category_id]
        except KeyError:
            raise CatalogError(f"Unknown category '{category_id}'") from None

    def by_hotkey(self, hotkey: str) -> Optional[Category]:
        """Look up a category by hotkey (case-insensitive)."""
        return self._by_hotkey.get(hotkey.upper())

    def find(self, item_id: str) -> Item:
        """Look up any item by id."""
        try:
            return self._items[item_id]
        except KeyError:
            raise CatalogError(f"Unknown item '{item_id}'") from None

    def items(self, category_id: str) -> Tuple[Item, ...]:
        """Items of a category."""
        return self.category(category_id).items

    def children(self, section_id: str) -> Tuple[Item, ...]:
        """Children of a section header."""
        item = self.find(section_id)
        if item.kind is not ItemKind.SECTION:
            raise CatalogError(f"'{section_id}' is not a section")
        return item.children

    def fields(self) -> List[TypedField]:
        """Every editable field in declaration order."""
        return [
            item.field
            for category in self._categories
            for item in self._walk(category.items)
            if item.field is not None
        ]
