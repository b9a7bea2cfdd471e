"""
Editor controller: screen stack and event dispatch for the config editor.

Displays feed operator events into handle() and render rows() and the
current prompt. Every ConsoleError raised while handling an event is
turned into a message; the screen it happened on stays open.
"""

import dataclasses
import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from PySide6.QtCore import QObject, Signal

from ..errors import ConsoleError, SessionStateError, ValidationError
from ..stores.collection_store import CollectionStore
from ..stores.menus import MENU_PREFIX, menu_commands_spec
from .catalog import Category, FieldCatalog, Item, ItemKind
from .declarations import MENU_EDITOR
from .fields import ValueKind, parse_value
from .projection import Row, project_categories, project_entries, project_items, project_keys
from .screens import (
    CatalogScreen,
    CollectionScreen,
    DirectoryScreen,
    FieldPrompt,
    RootScreen,
    Screen,
)
from .session import EditSession

ROOT_ID = "root"


class Event(Enum):
    """Operator events a display can send."""
    SELECT = "select"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CHOOSE_AS_SOURCE = "choose_as_source"
    CHOOSE_DESTINATION = "choose_destination"
    INSERT = "insert"
    DELETE = "delete"
    CONFIRM_EDIT = "confirm_edit"
    CANCEL_EDIT = "cancel_edit"
    SAVE = "save"
    BACK = "back"


class MessageLevel(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


ActionHandler = Callable[["EditorController", Item], None]


class EditorController(QObject):
    """
    Owns the screen stack and routes display events to fields and sessions.

    Signals:
        screen_changed: the top screen was pushed, popped or replaced
        rows_changed: rows of the top screen may differ
        message_posted: (level, text) inline message for the operator
        exit_requested: BACK on the root screen
    """

    screen_changed = Signal(object)
    rows_changed = Signal()
    message_posted = Signal(str, str)
    exit_requested = Signal()

    def __init__(
        self,
        catalog: FieldCatalog,
        store: CollectionStore,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.catalog = catalog
        self.store = store
        self.stack: List[Screen] = [RootScreen(ROOT_ID, "Main")]
        self.prompt: Optional[FieldPrompt] = None
        self.modified_count = 0
        self.last_message: Optional[tuple] = None
        self._actions: Dict[str, ActionHandler] = {}

        self.register_action(MENU_EDITOR, _open_menu_directory)

    # === STATE ACCESS ===

    @property
    def screen(self) -> Screen:
        return self.stack[-1]

    @property
    def session(self) -> Optional[EditSession]:
        screen = self.screen
        return screen.session if isinstance(screen, CollectionScreen) else None

    def breadcrumb(self) -> str:
        return " > ".join(screen.title for screen in self.stack)

    def rows(self) -> List[Row]:
        """Display rows of the top screen, recomputed on every call."""
        screen = self.screen
        if isinstance(screen, RootScreen):
            return project_categories(self.catalog.categories)
        if isinstance(screen, CatalogScreen):
            return project_items(screen.items)
        if isinstance(screen, DirectoryScreen):
            return project_keys(self.store.keys(screen.prefix), screen.prefix)
        if isinstance(screen, CollectionScreen) and screen.session is not None:
            session = screen.session
            return project_entries(session.entries, session.spec.describe, session.move_source)
        return []

    def register_action(self, target: str, handler: ActionHandler) -> None:
        """Bind an action item target to a handler."""
        self._actions[target] = handler

    def post(self, level: MessageLevel, text: str) -> None:
        self.last_message = (level, text)
        self.message_posted.emit(level.value, text)

    # === NAVIGATION ===

    def enter(self, screen: Screen) -> None:
        """Push a screen, or return to it if its id is already on the stack."""
        for depth, existing in enumerate(self.stack):
            if existing.id == screen.id:
                while len(self.stack) > depth + 1:
                    self._pop()
                self.screen_changed.emit(self.screen)
                return
        self.stack.append(screen)
        self.logger.debug(f"Entered {screen.id}")
        self.screen_changed.emit(screen)

    def back(self) -> bool:
        """Leave the top screen. Returns False when already at the root."""
        if len(self.stack) == 1:
            self.exit_requested.emit()
            return False
        self._pop()
        self.screen_changed.emit(self.screen)
        return True

    def _pop(self) -> None:
        screen = self.stack.pop()
        if isinstance(screen, CollectionScreen) and screen.session is not None and screen.session.dirty:
            self.logger.warning(f"Discarded unsaved changes to '{screen.session.spec.key}'")
            self.post(MessageLevel.WARNING, f"Unsaved changes to {screen.title} were discarded")

    def open_category(self, hotkey: str) -> bool:
        """Jump to a category by hotkey from anywhere."""
        category = self.catalog.by_hotkey(hotkey)
        if category is None:
            return False
        self.prompt = None
        while len(self.stack) > 1:
            self._pop()
        self._enter_category(category)
        self.rows_changed.emit()
        return True

    def _enter_category(self, category: Category) -> None:
        self.enter(CatalogScreen(category.id, category.label, items=category.items))

    def open_collection(self, spec_key: str, title: str, session: EditSession) -> None:
        self.enter(CollectionScreen(spec_key, title, session=session))

    # === EVENT DISPATCH ===

    def handle(self, event: Event, payload: Any = None) -> None:
        """Process one operator event to completion."""
        try:
            if self.prompt is not None:
                self._handle_prompt(event, payload)
            else:
                self._dispatch(event, payload)
        except ConsoleError as e:
            self.logger.info(f"{event.value} rejected: {e}")
            self.post(MessageLevel.ERROR, str(e))
        except IndexError as e:
            self.post(MessageLevel.ERROR, str(e))
        self.rows_changed.emit()

    def _dispatch(self, event: Event, payload: Any) -> None:
        if isinstance(self.screen, DirectoryScreen) and event is not Event.DELETE:
            self.screen.confirm_delete = None
        if event is Event.BACK:
            session = self.session
            if session is not None and not session.idle:
                session.cancel()
                self._clamp_cursor()
                self.post(MessageLevel.INFO, "Cancelled")
            else:
                self.back()
            return
        if event is Event.MOVE_UP:
            self._move_cursor(-1)
            return
        if event is Event.MOVE_DOWN:
            self._move_cursor(1)
            return

        if event is Event.SELECT and payload is not None:
            self._set_cursor(int(payload))

        screen = self.screen
        if isinstance(screen, CollectionScreen):
            self._dispatch_collection(screen, event, payload)
        elif isinstance(screen, DirectoryScreen):
            self._dispatch_directory(screen, event, payload)
        elif event is Event.SELECT:
            self._select_catalog_row()
        else:
            raise SessionStateError(f"'{event.value}' is not available here")

    def _cursor_limit(self) -> int:
        count = len(self.rows())
        session = self.session
        # One extra slot past the end lets a pending insert append
        if session is not None and session.insertion_pending:
            count += 1
        return count

    def _set_cursor(self, index: int) -> None:
        count = self._cursor_limit()
        if not 0 <= index < count:
            raise IndexError(f"No row {index + 1}")
        self.screen.cursor = index

    def _move_cursor(self, step: int) -> None:
        count = self._cursor_limit()
        if count == 0:
            return
        self.screen.cursor = (self.screen.cursor + step) % count
        session = self.session
        if session is not None and session.insertion_pending:
            session.aim_insert(self.screen.cursor)

    def _clamp_cursor(self) -> None:
        count = len(self.rows())
        self.screen.cursor = max(0, min(self.screen.cursor, count - 1))

    # --- catalog screens ---

    def _select_catalog_row(self) -> None:
        rows = self.rows()
        if not rows:
            return
        source = rows[self.screen.cursor].source
        if isinstance(source, Category):
            self._enter_category(source)
            return

        item: Item = source
        if item.kind is ItemKind.SECTION:
            self.enter(CatalogScreen(item.id, item.label, items=item.children))
        elif item.kind is ItemKind.ACTION:
            handler = self._actions.get(item.target or "")
            if handler is None:
                raise SessionStateError(f"No editor registered for '{item.target}'")
            handler(self, item)
        elif item.field is not None:
            self.prompt = FieldPrompt(item.field, item.field.format_value())

    def _handle_prompt(self, event: Event, payload: Any) -> None:
        prompt = self.prompt
        if event is Event.CANCEL_EDIT or event is Event.BACK:
            self.prompt = None
            return
        if event is not Event.CONFIRM_EDIT:
            raise SessionStateError("Finish or cancel the current edit first")

        if payload is not None:
            prompt.text = str(payload)
        field = prompt.field
        before = field.read()
        try:
            field.write(field.parse(prompt.text))
        except ValidationError as e:
            prompt.error = e.reason
            prompt.text = field.format_value()
            raise
        except ConsoleError as e:
            # Store failures keep the candidate text for a retry
            prompt.error = str(e)
            raise

        self.prompt = None
        after = field.read()
        if after != before:
            self.modified_count += 1
        self.post(MessageLevel.SUCCESS, f"{field.label} set to {field.format_value(after)}")

    # --- directory screens ---

    def _dispatch_directory(self, screen: DirectoryScreen, event: Event, payload: Any) -> None:
        if event is Event.SELECT:
            rows = self.rows()
            if not rows:
                return
            name = rows[screen.cursor].label
            spec = screen.spec_for(name)
            session = EditSession.open(spec, self.store)
            self.open_collection(spec.key, spec.label, session)
        elif event is Event.INSERT:
            if not payload:
                raise ValidationError(screen.id, "a name is required")
            spec = screen.spec_for(str(payload))
            if spec.key in self.store.keys(screen.prefix):
                raise ValidationError(screen.id, f"'{payload}' already exists")
            self.store.replace(spec.key, [])
            self.post(MessageLevel.SUCCESS, f"Created {spec.label}")
        elif event is Event.DELETE:
            self._delete_collection(screen)
        else:
            raise SessionStateError(f"'{event.value}' is not available here")

    def _delete_collection(self, screen: DirectoryScreen) -> None:
        """Remove the collection under the cursor once the operator confirms."""
        rows = self.rows()
        if not rows:
            return
        spec = screen.spec_for(rows[screen.cursor].label)
        if screen.confirm_delete != spec.key:
            screen.confirm_delete = spec.key
            self.post(
                MessageLevel.WARNING,
                f"Delete {spec.label}? This is permanent. Delete again to confirm",
            )
            return
        screen.confirm_delete = None
        self.store.delete(spec.key)
        self._clamp_cursor()
        self.logger.info(f"Deleted collection '{spec.key}'")
        self.post(MessageLevel.SUCCESS, f"Deleted {spec.label}")

    # --- collection screens ---

    def _dispatch_collection(self, screen: CollectionScreen, event: Event, payload: Any) -> None:
        session = screen.session
        cursor = screen.cursor

        if event is Event.SELECT:
            if session.move_source is not None:
                session.complete_move(cursor)
            elif session.insertion_pending:
                screen.cursor = session.place_insert(cursor)
            else:
                session.arm_move(cursor)
                self.post(MessageLevel.INFO, "Choose where to move it")
        elif event is Event.CHOOSE_AS_SOURCE:
            session.arm_move(cursor)
            self.post(MessageLevel.INFO, "Choose where to move it")
        elif event is Event.CHOOSE_DESTINATION:
            if session.move_source is not None:
                session.complete_move(cursor)
            elif session.insertion_pending:
                screen.cursor = session.place_insert(cursor)
            else:
                raise SessionStateError("Choose an entry to move or insert first")
        elif event is Event.INSERT:
            session.begin_insert(payload)
            session.aim_insert(cursor)
            self.post(MessageLevel.INFO, "Choose where to insert the new entry")
        elif event is Event.DELETE:
            session.delete(cursor)
            self._clamp_cursor()
        elif event is Event.CANCEL_EDIT:
            session.cancel()
            self._clamp_cursor()
        elif event is Event.CONFIRM_EDIT:
            self._update_entry(session, cursor, payload)
        elif event is Event.SAVE:
            session.commit()
            self.post(MessageLevel.SUCCESS, f"Saved {screen.title}")

    def _update_entry(self, session: EditSession, index: int, changes: Any) -> None:
        if not isinstance(changes, Mapping):
            raise SessionStateError("Entry edits need field changes")
        if not 0 <= index < len(session):
            raise IndexError(f"No row {index + 1}")
        entry = session.entries[index]
        values = {}
        for name, value in changes.items():
            if not hasattr(entry, name):
                raise ValidationError(name, "no such attribute")
            # Text input for flag attributes is read as yes/no
            if isinstance(getattr(entry, name), bool) and isinstance(value, str):
                value = parse_value(ValueKind.BOOLEAN, value, name).value
            values[name] = value
        try:
            updated = dataclasses.replace(entry, **values)
        except TypeError as e:
            raise ValidationError(session.spec.key, str(e)) from e
        session.update(index, updated)


def _open_menu_directory(controller: EditorController, item: Item) -> None:
    controller.enter(
        DirectoryScreen(
            item.target or MENU_EDITOR,
            item.label,
            prefix=MENU_PREFIX,
            spec_for=menu_commands_spec,
        )
    )
