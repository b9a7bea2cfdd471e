"""
Edit sessions that stage structural changes to an ordered collection.

A session holds the working copy of one collection and a single state:
idle, a move awaiting its destination, or an insertion awaiting its
position. Nothing reaches the store until commit().
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Union

from ..errors import EmptyCollectionSeed, SessionStateError, StoreWriteFailed, ValidationError
from ..stores.collection_store import CollectionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollectionSpec:
    """How one kind of collection is loaded, shown and extended."""
    key: str
    label: str
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]
    describe: Callable[[Any], str]
    new_entry: Callable[[], Any]
    seed: Optional[Callable[[], List[Any]]] = None
    required: bool = False
    entry_type: type = object
    # Builds an entry from operator text, e.g. the keys of a new command
    named_entry: Optional[Callable[[str], Any]] = None


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class MoveArmed:
    source: int


@dataclass(frozen=True)
class InsertArmed:
    entry: Any
    target: Optional[int] = None


SessionState = Union[Idle, MoveArmed, InsertArmed]


@dataclass
class EditSession:
    """Working copy of one collection plus the staged operation."""
    spec: CollectionSpec
    store: CollectionStore
    entries: List[Any] = field(default_factory=list)
    state: SessionState = field(default_factory=Idle)

    def __post_init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._baseline: List[Any] = list(self.entries)

    @classmethod
    def open(cls, spec: CollectionSpec, store: CollectionStore) -> "EditSession":
        """Load a collection into a fresh session."""
        session = cls(spec, store)
        session.reload()
        return session

    def reload(self) -> None:
        """Replace the working copy with the stored collection, dropping staged edits.

        An empty collection is seeded and the seed written back when the
        collection type has one; a required collection without a seed
        raises EmptyCollectionSeed.
        """
        raw = self.store.load(self.spec.key)
        if not raw:
            if self.spec.seed is not None:
                seeded = self.spec.seed()
                self.store.replace(self.spec.key, [self.spec.encode(e) for e in seeded])
                self.logger.info(f"Seeded empty collection '{self.spec.key}' with {len(seeded)} entries")
                raw = self.store.load(self.spec.key)
            elif self.spec.required:
                raise EmptyCollectionSeed(self.spec.key)
        self.entries = [self.spec.decode(item) for item in raw]
        self.state = Idle()
        self._baseline = list(self.entries)
        self.logger.debug(f"Loaded '{self.spec.key}' with {len(self.entries)} entries")

    # === DERIVED VIEWS ===

    @property
    def dirty(self) -> bool:
        """True when the working copy differs from what was last loaded or saved."""
        return self.entries != self._baseline

    @property
    def loaded_entries(self) -> Sequence[Any]:
        return tuple(self.entries)

    @property
    def move_source(self) -> Optional[int]:
        return self.state.source if isinstance(self.state, MoveArmed) else None

    @property
    def staged_new_entry(self) -> Optional[Any]:
        return self.state.entry if isinstance(self.state, InsertArmed) else None

    @property
    def staged_insertion_index(self) -> Optional[int]:
        return self.state.target if isinstance(self.state, InsertArmed) else None

    @property
    def insertion_pending(self) -> bool:
        return isinstance(self.state, InsertArmed)

    @property
    def idle(self) -> bool:
        return isinstance(self.state, Idle)

    def __len__(self) -> int:
        return len(self.entries)

    # === TRANSITIONS ===

    def _require_idle(self, operation: str) -> None:
        if not self.idle:
            raise SessionStateError(
                f"Cannot {operation} while a {type(self.state).__name__} operation is pending"
            )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.entries):
            raise IndexError(f"Entry {index} out of range for {len(self.entries)} entries")

    def arm_move(self, source: int) -> None:
        """Mark an entry as the source of a move."""
        self._require_idle("start a move")
        self._check_index(source)
        self.state = MoveArmed(source)

    def complete_move(self, destination: int) -> None:
        """Move the armed entry so it ends up at `destination`.

        The destination is clamped to the valid range; moving onto the
        source index is a no-op that still returns to idle.
        """
        if not isinstance(self.state, MoveArmed):
            raise SessionStateError("No move source chosen")
        source = self.state.source
        destination = max(0, min(destination, len(self.entries) - 1))
        if destination != source:
            entry = self.entries.pop(source)
            self.entries.insert(destination, entry)
            self.logger.debug(f"Moved entry {source} -> {destination} in '{self.spec.key}'")
        self.state = Idle()

    def begin_insert(self, entry: Any = None) -> None:
        """Stage a new entry (blank unless given) awaiting its position.

        Text is turned into an entry when the collection knows how to name
        one. Anything that is not an entry of the collection's type raises
        ValidationError.
        """
        self._require_idle("start an insert")
        if entry is None:
            entry = self.spec.new_entry()
        elif isinstance(entry, str) and self.spec.named_entry is not None:
            entry = self.spec.named_entry(entry)
        if not isinstance(entry, self.spec.entry_type):
            raise ValidationError(
                self.spec.key, f"cannot insert a {type(entry).__name__} here"
            )
        self.state = InsertArmed(entry)

    def aim_insert(self, index: int) -> None:
        """Update where the staged entry would be placed."""
        if not isinstance(self.state, InsertArmed):
            raise SessionStateError("No insertion pending")
        self.state = InsertArmed(self.state.entry, max(0, min(index, len(self.entries))))

    def place_insert(self, index: Optional[int] = None) -> int:
        """Insert the staged entry, shifting later entries right.

        Uses the aimed index when none is given, appending if never aimed.
        Indices past the end clamp to an append. Returns the final index.
        """
        if not isinstance(self.state, InsertArmed):
            raise SessionStateError("No insertion pending")
        if index is None:
            index = self.state.target if self.state.target is not None else len(self.entries)
        index = max(0, min(index, len(self.entries)))
        self.entries.insert(index, self.state.entry)
        self.state = Idle()
        self.logger.debug(f"Inserted entry at {index} in '{self.spec.key}'")
        return index

    def cancel(self) -> None:
        """Abandon a pending move or insertion without changing entries."""
        if self.idle:
            raise SessionStateError("Nothing to cancel")
        self.state = Idle()

    def delete(self, index: int) -> Any:
        """Remove an entry, shifting later entries left."""
        self._require_idle("delete")
        self._check_index(index)
        entry = self.entries.pop(index)
        self.logger.debug(f"Deleted entry {index} from '{self.spec.key}'")
        return entry

    def update(self, index: int, entry: Any) -> None:
        """Replace one entry's contents in the working copy."""
        self._require_idle("edit an entry")
        self._check_index(index)
        self.entries[index] = entry

    def commit(self) -> None:
        """Write the working copy to the store as one replace.

        On failure the working copy is kept, still dirty, so the
        operator can retry.
        """
        self._require_idle("save")
        try:
            self.store.replace(self.spec.key, [self.spec.encode(e) for e in self.entries])
        except StoreWriteFailed:
            self.logger.error(f"Commit of '{self.spec.key}' failed, keeping unsaved changes")
            raise
        self._baseline = list(self.entries)
        self.logger.info(f"Saved {len(self.entries)} entries to '{self.spec.key}'")
