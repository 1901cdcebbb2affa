# ui/roster_model.py - modèle Qt de la table, reconstruit depuis un instantané du roster
from __future__ import annotations

from PyQt6.QtCore import Qt, QAbstractTableModel, QModelIndex, QVariant

from payroll_desk.logic.formatting import fmt_money
from payroll_desk.services.roster import Roster

HEADERS = ["Name", "ID", "Salary"]
_DF_COLUMNS = ["name", "id", "pay"]


class RosterTableModel(QAbstractTableModel):
    """
    Modèle léger (Name, ID, Salary) branché sur un Roster.

    À chaque mutation du roster, le modèle reprend ``roster.list()`` et
    ``roster.to_dataframe()`` puis se réinitialise. La colonne Salary est
    affichée formatée ; la valeur brute est exposée via ``UserRole``.
    """

    def __init__(self, roster: Roster, parent=None):
        super().__init__(parent)
        self._roster = roster
        self._records = []
        self._df = None
        self._snapshot()
        roster.subscribe(self._on_roster_changed)

    # ------ Public API ------
    def record_at(self, row: int):
        if 0 <= row < len(self._records):
            return self._records[row]
        return None

    def row_of(self, record) -> int:
        for idx, current in enumerate(self._records):
            if current is record:
                return idx
        return -1

    def dataframe(self):
        """Instantané affiché (colonnes name, id, pay)."""
        return self._df.copy()

    def detach(self):
        self._roster.unsubscribe(self._on_roster_changed)

    # ------ Qt ------
    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._records)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(HEADERS)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if (
            not index.isValid()
            or not (0 <= index.row() < len(self._records))
            or not (0 <= index.column() < len(HEADERS))
        ):
            return QVariant()
        val = self._df.iat[index.row(), index.column()]
        if role == Qt.ItemDataRole.UserRole:
            return val.item() if hasattr(val, "item") else val
        if role == Qt.ItemDataRole.DisplayRole:
            if index.column() == 2:
                return fmt_money(float(val))
            return str(val)
        if role == Qt.ItemDataRole.TextAlignmentRole and index.column() > 0:
            return Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        return QVariant()

    def headerData(self, section, orientation, role=Qt.ItemDataRole.DisplayRole):
        if role != Qt.ItemDataRole.DisplayRole:
            return QVariant()
        if orientation == Qt.Orientation.Horizontal:
            if 0 <= section < len(HEADERS):
                return HEADERS[section]
            return QVariant()
        return str(section + 1)

    # ------ Internes ------
    def _snapshot(self):
        self._records = self._roster.list()
        self._df = self._roster.to_dataframe()[_DF_COLUMNS].reset_index(drop=True)

    def _on_roster_changed(self, _roster):
        self.beginResetModel()
        self._snapshot()
        self.endResetModel()
