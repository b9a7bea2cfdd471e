"""
Menu commands: the ordered collection type the console edits.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List

from ..editor.session import CollectionSpec
from .collection_store import CollectionStore

logger = logging.getLogger(__name__)

MENU_PREFIX = "menus/"
DEFAULT_MENU = "MAIN"


@dataclass(frozen=True)
class MenuCommand:
    """One command on a menu, in display order."""
    keys: str = ""
    short_description: str = ""
    acs_required: str = ""
    cmd_keys: str = ""
    options: str = ""
    active: bool = True
    hidden: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuCommand":
        """Build from a stored mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def describe(self) -> str:
        """One-line summary for list display."""
        flags = []
        if not self.active:
            flags.append("inactive")
        if self.hidden:
            flags.append("hidden")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        keys = self.keys or "-"
        description = self.short_description or "(no description)"
        return f"{keys:<6} {description:<30} {self.cmd_keys}{suffix}".rstrip()

    def with_changes(self, **changes: Any) -> "MenuCommand":
        return replace(self, **changes)


def menu_key(name: str) -> str:
    """Collection key for a menu's commands."""
    return f"{MENU_PREFIX}{name.upper()}"


def default_commands() -> List[MenuCommand]:
    """Commands for a freshly created menu."""
    return [MenuCommand(keys="G", short_description="Goodbye", cmd_keys="G")]


def named_command(keys: str) -> MenuCommand:
    """Blank command bound to the given keys."""
    return MenuCommand(keys=keys.strip().upper())


def menu_commands_spec(name: str) -> CollectionSpec:
    """Collection spec for the commands of one menu."""
    return CollectionSpec(
        key=menu_key(name),
        label=f"Menu {name.upper()}",
        decode=MenuCommand.from_dict,
        encode=MenuCommand.to_dict,
        describe=MenuCommand.describe,
        new_entry=MenuCommand,
        seed=default_commands if name.upper() == DEFAULT_MENU else None,
        entry_type=MenuCommand,
        named_entry=named_command,
    )


def ensure_default_menu(store: CollectionStore) -> bool:
    """Create the main menu with its default commands if no menus exist.

    Returns True if the menu was created.
    """
    if store.keys(MENU_PREFIX):
        return False
    store.replace(menu_key(DEFAULT_MENU), [c.to_dict() for c in default_commands()])
    logger.info(f"Created default menu {DEFAULT_MENU}")
    return True
