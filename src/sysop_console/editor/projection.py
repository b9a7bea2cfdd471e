"""
List projection: turns catalog subtrees and collections into display rows.

Every function here is pure and recomputes from its inputs on each call.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .catalog import Category, Item, ItemKind


@dataclass(frozen=True)
class Row:
    """One display row."""
    index: int
    label: str
    value: str = ""
    help_text: str = ""
    kind: Optional[ItemKind] = None
    source: Any = None
    marked: bool = False


def has_displayable(item: Item) -> bool:
    """Fields and actions always display; sections only when something below does."""
    if item.kind is not ItemKind.SECTION:
        return True
    return any(has_displayable(child) for child in item.children)


def project_items(items: Sequence[Item]) -> List[Row]:
    """Project catalog items, skipping sections with nothing to show."""
    rows: List[Row] = []
    for item in items:
        if not has_displayable(item):
            continue
        value = ""
        if item.field is not None:
            value = item.field.format_value()
        rows.append(
            Row(
                index=len(rows),
                label=item.label,
                value=value,
                help_text=item.help_text,
                kind=item.kind,
                source=item,
            )
        )
    return rows


def project_categories(categories: Iterable[Category]) -> List[Row]:
    """Project the top-level menu bar, skipping categories with nothing to show."""
    rows: List[Row] = []
    for category in categories:
        if not any(has_displayable(item) for item in category.items):
            continue
        rows.append(
            Row(
                index=len(rows),
                label=f"{category.label} ({category.hotkey})",
                source=category,
            )
        )
    return rows


def project_entries(
    entries: Sequence[Any],
    describe: Callable[[Any], str],
    marked: Optional[int] = None,
) -> List[Row]:
    """Project collection entries in order; `marked` flags one row (the move source)."""
    return [
        Row(index=i, label=describe(entry), source=entry, marked=(i == marked))
        for i, entry in enumerate(entries)
    ]


def project_keys(keys: Iterable[str], prefix: str = "") -> List[Row]:
    """Project collection keys with the prefix stripped for display."""
    return [
        Row(index=i, label=key[len(prefix):] if key.startswith(prefix) else key, source=key)
        for i, key in enumerate(keys)
    ]
