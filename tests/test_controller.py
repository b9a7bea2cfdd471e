"""Tests for the editor controller."""

from typing import List, Tuple

import pytest

from sysop_console.editor.catalog import Category, FieldCatalog, action
from sysop_console.editor.controller import EditorController, Event, MessageLevel
from sysop_console.editor.screens import (
    CatalogScreen,
    CollectionScreen,
    DirectoryScreen,
    RootScreen,
)
from sysop_console.settings import ConsoleSettings
from sysop_console.stores import JsonCollectionStore
from sysop_console.stores.menus import MenuCommand, menu_key


def labels(controller: EditorController) -> List[str]:
    return [row.label for row in controller.rows()]


def open_general(controller: EditorController) -> None:
    controller.open_category("C")
    controller.handle(Event.SELECT, labels(controller).index("General"))


def open_timeout_prompt(controller: EditorController) -> None:
    open_general(controller)
    controller.handle(Event.SELECT, labels(controller).index("Timeout Mins"))


@pytest.fixture
def messages(controller: EditorController) -> List[Tuple[str, str]]:
    received: List[Tuple[str, str]] = []
    controller.message_posted.connect(lambda level, text: received.append((level, text)))
    return received


@pytest.fixture
def menu_store(store: JsonCollectionStore) -> JsonCollectionStore:
    store.replace(
        menu_key("MAIN"),
        [MenuCommand(keys=k, short_description=k).to_dict() for k in ("A", "B", "C")],
    )
    return store


def open_main_menu(controller: EditorController) -> CollectionScreen:
    controller.open_category("E")
    controller.handle(Event.SELECT, 0)
    assert isinstance(controller.screen, DirectoryScreen)
    controller.handle(Event.SELECT, labels(controller).index("MAIN"))
    assert isinstance(controller.screen, CollectionScreen)
    return controller.screen


def entry_keys(screen: CollectionScreen) -> List[str]:
    return [entry.keys for entry in screen.session.entries]


class TestNavigation:
    """Test the screen stack."""

    def test_starts_at_root(self, controller: EditorController) -> None:
        assert isinstance(controller.screen, RootScreen)
        assert labels(controller) == ["Configuration (C)", "Servers (S)", "Editors (E)", "Other (O)"]

    def test_select_category_then_section(self, controller: EditorController) -> None:
        controller.handle(Event.SELECT, 0)
        assert isinstance(controller.screen, CatalogScreen)
        assert labels(controller) == ["Paths", "General", "New Users", "Auth Persistence"]

        controller.handle(Event.SELECT, 1)
        assert controller.screen.id == "configuration.general"
        assert controller.breadcrumb() == "Main > Configuration > General"

    def test_cursor_wraps(self, controller: EditorController) -> None:
        controller.handle(Event.MOVE_UP)
        assert controller.screen.cursor == 3
        controller.handle(Event.MOVE_DOWN)
        assert controller.screen.cursor == 0

    def test_back_pops(self, controller: EditorController) -> None:
        open_general(controller)
        controller.handle(Event.BACK)
        assert controller.screen.id == "configuration"
        controller.handle(Event.BACK)
        assert isinstance(controller.screen, RootScreen)

    def test_back_at_root_requests_exit(self, controller: EditorController) -> None:
        exits = []
        controller.exit_requested.connect(lambda: exits.append(True))
        controller.handle(Event.BACK)
        assert exits == [True]
        assert len(controller.stack) == 1

    def test_no_duplicate_screens(self, controller: EditorController) -> None:
        """Test re-entering a screen on the stack returns to it."""
        open_general(controller)
        assert len(controller.stack) == 3
        controller.enter(CatalogScreen("configuration", "Configuration"))
        assert len(controller.stack) == 2
        assert controller.screen.id == "configuration"

    def test_hotkey_jump_replaces_stack(self, controller: EditorController) -> None:
        open_general(controller)
        assert controller.open_category("s")
        assert [s.id for s in controller.stack] == ["root", "servers"]
        assert not controller.open_category("Z")

    def test_unregistered_action(self, settings: ConsoleSettings, store: JsonCollectionStore) -> None:
        catalog = FieldCatalog([Category("x", "X", "X", (action("x.go", "Go", "nowhere"),))])
        controller = EditorController(catalog, store)
        controller.open_category("X")
        controller.handle(Event.SELECT, 0)
        assert controller.last_message[0] is MessageLevel.ERROR
        assert controller.screen.id == "x"

    def test_registered_action(self, store: JsonCollectionStore) -> None:
        catalog = FieldCatalog([Category("x", "X", "X", (action("x.go", "Go", "custom"),))])
        controller = EditorController(catalog, store)
        seen = []
        controller.register_action("custom", lambda ctl, item: seen.append(item.id))
        controller.open_category("X")
        controller.handle(Event.SELECT, 0)
        assert seen == ["x.go"]

    def test_select_out_of_range(self, controller: EditorController) -> None:
        controller.handle(Event.SELECT, 10)
        assert controller.last_message[0] is MessageLevel.ERROR
        assert isinstance(controller.screen, RootScreen)


class TestFieldEditing:
    """Test the single-value prompt."""

    def test_select_field_opens_prompt(self, controller: EditorController) -> None:
        open_timeout_prompt(controller)
        assert controller.prompt is not None
        assert controller.prompt.field.label == "Timeout Mins"
        assert controller.prompt.text == "3"

    def test_rejected_then_accepted(self, controller: EditorController, settings: ConsoleSettings, messages) -> None:
        """Test -5 keeps the prompt open with an error, then 30 is stored."""
        open_timeout_prompt(controller)

        controller.handle(Event.CONFIRM_EDIT, "-5")
        assert controller.prompt is not None
        assert controller.prompt.error == "must be greater than zero"
        assert controller.prompt.text == "3"
        assert settings.general.timeout_minutes == 3
        assert messages[-1][0] == "error"
        assert controller.modified_count == 0

        controller.handle(Event.CONFIRM_EDIT, "30")
        assert controller.prompt is None
        assert settings.general.timeout_minutes == 30
        assert controller.modified_count == 1
        assert messages[-1] == ("success", "Timeout Mins set to 30")

    def test_unparseable_input(self, controller: EditorController) -> None:
        open_timeout_prompt(controller)
        controller.handle(Event.CONFIRM_EDIT, "soon")
        assert controller.prompt is not None
        assert "whole number" in controller.prompt.error

    def test_huge_number_rejected(self, controller: EditorController, settings: ConsoleSettings) -> None:
        open_timeout_prompt(controller)
        controller.handle(Event.CONFIRM_EDIT, str(2 ** 70))
        assert controller.prompt is not None
        assert "out of range" in controller.prompt.error
        assert controller.last_message[0] is MessageLevel.ERROR
        assert settings.general.timeout_minutes == 3

    def test_unchanged_value_not_counted(self, controller: EditorController) -> None:
        open_timeout_prompt(controller)
        controller.handle(Event.CONFIRM_EDIT, "3")
        assert controller.prompt is None
        assert controller.modified_count == 0

    def test_cancel_keeps_value(self, controller: EditorController, settings: ConsoleSettings) -> None:
        open_timeout_prompt(controller)
        controller.prompt.text = "99"
        controller.handle(Event.CANCEL_EDIT)
        assert controller.prompt is None
        assert settings.general.timeout_minutes == 3

    def test_other_events_blocked_while_prompting(self, controller: EditorController) -> None:
        open_timeout_prompt(controller)
        controller.handle(Event.MOVE_DOWN)
        assert controller.prompt is not None
        assert controller.last_message[0] is MessageLevel.ERROR

    def test_boolean_field(self, controller: EditorController, settings: ConsoleSettings) -> None:
        controller.open_category("C")
        controller.handle(Event.SELECT, labels(controller).index("New Users"))
        controller.handle(Event.SELECT, labels(controller).index("Allow New Users"))
        controller.handle(Event.CONFIRM_EDIT, "n")
        assert settings.new_users.allow_new is False
        rows = {row.label: row.value for row in controller.rows()}
        assert rows["Allow New Users"] == "No"


class TestCollectionEditing:
    """Test structural edits through the menu editor."""

    def test_directory_lists_menus(self, controller: EditorController, menu_store) -> None:
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        assert labels(controller) == ["MAIN"]

    def test_move_by_selecting_twice(self, controller: EditorController, menu_store) -> None:
        """Test [A,B,C] moving 0 to 2 gives [B,C,A] in memory only."""
        screen = open_main_menu(controller)
        controller.handle(Event.SELECT, 0)
        assert screen.session.move_source == 0
        assert controller.rows()[0].marked

        controller.handle(Event.SELECT, 2)
        assert entry_keys(screen) == ["B", "C", "A"]
        assert [c["keys"] for c in menu_store.load(menu_key("MAIN"))] == ["A", "B", "C"]

        controller.handle(Event.SAVE)
        assert [c["keys"] for c in menu_store.load(menu_key("MAIN"))] == ["B", "C", "A"]
        assert not screen.session.dirty

    def test_choose_source_and_destination(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.MOVE_DOWN)
        controller.handle(Event.MOVE_DOWN)
        controller.handle(Event.CHOOSE_AS_SOURCE)
        controller.handle(Event.MOVE_DOWN)
        controller.handle(Event.CHOOSE_DESTINATION)
        assert entry_keys(screen) == ["C", "A", "B"]

    def test_insert_in_middle(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.INSERT, MenuCommand(keys="X"))
        assert screen.session.insertion_pending
        controller.handle(Event.MOVE_DOWN)
        assert screen.session.staged_insertion_index == 1
        controller.handle(Event.CHOOSE_DESTINATION)
        assert entry_keys(screen) == ["A", "X", "B", "C"]
        assert screen.cursor == 1

    def test_insert_at_end(self, controller: EditorController, menu_store) -> None:
        """Test the slot past the last entry is reachable while inserting."""
        screen = open_main_menu(controller)
        controller.handle(Event.INSERT, MenuCommand(keys="X"))
        controller.handle(Event.SELECT, 3)
        assert entry_keys(screen) == ["A", "B", "C", "X"]
        assert screen.cursor == 3

        controller.handle(Event.SELECT, 4)
        assert controller.last_message[0] is MessageLevel.ERROR

    def test_cancelled_insert_clamps_cursor(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.INSERT, MenuCommand(keys="X"))
        controller.handle(Event.MOVE_UP)
        assert screen.cursor == 3
        controller.handle(Event.CANCEL_EDIT)
        assert screen.cursor == 2
        assert entry_keys(screen) == ["A", "B", "C"]

    def test_insert_blank_command(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.INSERT)
        assert screen.session.staged_new_entry == MenuCommand()

    def test_delete(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.SELECT, 2)  # arms a move
        controller.handle(Event.CANCEL_EDIT)
        controller.handle(Event.DELETE)
        assert entry_keys(screen) == ["A", "B"]
        assert screen.cursor == 1

    def test_destination_without_source(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.CHOOSE_DESTINATION)
        assert controller.last_message[0] is MessageLevel.ERROR
        assert entry_keys(screen) == ["A", "B", "C"]

    def test_edit_entry_attributes(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.CONFIRM_EDIT, {"short_description": "About", "hidden": "yes"})
        entry = screen.session.entries[0]
        assert entry.short_description == "About"
        assert entry.hidden is True
        assert screen.session.dirty

    def test_edit_unknown_attribute(self, controller: EditorController, menu_store) -> None:
        screen = open_main_menu(controller)
        controller.handle(Event.CONFIRM_EDIT, {"colour": "red"})
        assert controller.last_message[0] is MessageLevel.ERROR
        assert not screen.session.dirty

    def test_back_cancels_pending_then_discards(self, controller: EditorController, menu_store, messages) -> None:
        """Test leaving with unsaved changes warns and drops them."""
        screen = open_main_menu(controller)
        controller.handle(Event.DELETE)
        controller.handle(Event.SELECT, 0)
        assert screen.session.move_source == 0

        controller.handle(Event.BACK)
        assert controller.screen is screen
        assert screen.session.idle

        controller.handle(Event.BACK)
        assert isinstance(controller.screen, DirectoryScreen)
        assert ("warning", "Unsaved changes to Menu MAIN were discarded") in messages

        screen = open_main_menu(controller)
        assert entry_keys(screen) == ["A", "B", "C"]

    def test_failed_save_keeps_changes(self, controller: EditorController, menu_store, monkeypatch) -> None:
        from sysop_console.errors import StoreWriteFailed

        screen = open_main_menu(controller)
        controller.handle(Event.DELETE)

        def refuse(key, entries):
            raise StoreWriteFailed(key, "read-only filesystem")

        monkeypatch.setattr(menu_store, "replace", refuse)
        controller.handle(Event.SAVE)
        assert controller.last_message[0] is MessageLevel.ERROR
        assert "read-only filesystem" in controller.last_message[1]
        assert screen.session.dirty
        assert entry_keys(screen) == ["B", "C"]

    def test_main_menu_seeded_when_empty(self, controller: EditorController, store: JsonCollectionStore) -> None:
        store.replace(menu_key("MAIN"), [])
        screen = open_main_menu(controller)
        assert entry_keys(screen) == ["G"]

    def test_create_menu(self, controller: EditorController, menu_store) -> None:
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        controller.handle(Event.INSERT, "files")
        assert labels(controller) == ["FILES", "MAIN"]
        controller.handle(Event.INSERT, "files")
        assert controller.last_message[0] is MessageLevel.ERROR

    def test_delete_only_command(self, controller: EditorController, store: JsonCollectionStore) -> None:
        """Test removing the last command of a menu leaves an empty list."""
        store.replace(menu_key("SOLO"), [MenuCommand(keys="X").to_dict()])
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        controller.handle(Event.SELECT, labels(controller).index("SOLO"))
        screen = controller.screen

        controller.handle(Event.DELETE)
        assert screen.session.entries == []
        assert screen.cursor == 0
        assert controller.rows() == []

        controller.handle(Event.SAVE)
        assert store.load(menu_key("SOLO")) == []


    def test_restored_order_leaves_quietly(self, controller: EditorController, menu_store, messages) -> None:
        """Test leaving after undoing a move by hand posts no discard warning."""
        screen = open_main_menu(controller)
        controller.handle(Event.SELECT, 0)
        controller.handle(Event.SELECT, 2)
        controller.handle(Event.SELECT, 2)
        controller.handle(Event.SELECT, 0)
        assert entry_keys(screen) == ["A", "B", "C"]
        assert not screen.session.dirty

        controller.handle(Event.BACK)
        assert all(level != "warning" for level, _ in messages)

class TestMenuDirectory:
    """Test managing whole menus from the menu list."""

    def test_delete_menu_after_confirmation(self, controller: EditorController, menu_store) -> None:
        menu_store.replace(menu_key("FILES"), [])
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        assert labels(controller) == ["FILES", "MAIN"]

        controller.handle(Event.DELETE)
        assert controller.last_message[0] is MessageLevel.WARNING
        assert labels(controller) == ["FILES", "MAIN"]

        controller.handle(Event.DELETE)
        assert controller.last_message == (MessageLevel.SUCCESS, "Deleted Menu FILES")
        assert labels(controller) == ["MAIN"]
        assert menu_store.keys("menus/") == [menu_key("MAIN")]

    def test_other_event_withdraws_confirmation(self, controller: EditorController, menu_store) -> None:
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        controller.handle(Event.DELETE)
        controller.handle(Event.MOVE_DOWN)
        controller.handle(Event.DELETE)
        assert controller.last_message[0] is MessageLevel.WARNING
        assert labels(controller) == ["MAIN"]

    def test_delete_last_menu_clamps_cursor(self, controller: EditorController, menu_store) -> None:
        menu_store.replace(menu_key("FILES"), [])
        controller.open_category("E")
        controller.handle(Event.SELECT, 0)
        controller.handle(Event.MOVE_DOWN)
        controller.handle(Event.DELETE)
        controller.handle(Event.DELETE)
        assert labels(controller) == ["FILES"]
        assert controller.screen.cursor == 0
