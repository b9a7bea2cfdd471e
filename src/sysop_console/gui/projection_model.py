"""
Qt list model over the editor controller's display rows.
"""

import logging
from typing import Any, List, Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from ..editor.controller import EditorController
from ..editor.projection import Row

RowRole = Qt.ItemDataRole.UserRole + 1


class ProjectionListModel(QAbstractListModel):
    """Exposes the rows of the controller's top screen to Qt item views.

    The model resets whenever the controller reports a screen or row
    change, so views always show the current projection.
    """

    def __init__(self, controller: EditorController, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._controller = controller
        self._rows: List[Row] = controller.rows()

        controller.rows_changed.connect(self.refresh)
        controller.screen_changed.connect(self.refresh)

    def refresh(self, *args: Any) -> None:
        """Recompute rows from the controller."""
        self.beginResetModel()
        self._rows = self._controller.rows()
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._rows):
            return None

        row = self._rows[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            text = f"{row.label}: {row.value}" if row.value else row.label
            return f"> {text}" if row.marked else text
        if role == Qt.ItemDataRole.ToolTipRole:
            return row.help_text or None
        if role == RowRole:
            return row
        return None

    def roleNames(self) -> dict:
        names = super().roleNames()
        names[RowRole] = b"row"
        return names
