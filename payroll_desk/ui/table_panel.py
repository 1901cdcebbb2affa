# ui/table_panel.py - table du roster + sélection de ligne + menu contextuel (PyQt6)
from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QMenu,
    QSizePolicy,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from payroll_desk.services.roster import Roster

from .roster_model import HEADERS, RosterTableModel

logger = logging.getLogger(__name__)


class RosterTablePanel(QWidget):
    """
    Panneau Table :
    - affiche le roster via RosterTableModel (re-rendu à chaque mutation)
    - sélection d'une seule ligne, ``selected_record()`` pour la suppression
    - menu contextuel (copier la ligne, copier tout) vers le presse-papiers
    """

    def __init__(self, roster: Roster, parent=None):
        super().__init__(parent)
        self.roster = roster

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(6)

        self.model = RosterTableModel(roster, self)

        self.view = QTableView(self)
        self.view.setModel(self.model)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.view.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        self.view.setAlternatingRowColors(True)
        self.view.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.view.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.view.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.view.setWordWrap(False)
        self.view.horizontalHeader().setStretchLastSection(True)
        self.view.horizontalHeader().setDefaultSectionSize(160)
        self.view.verticalHeader().setVisible(False)
        self.view.setCornerButtonEnabled(False)

        # menu contextuel
        self.view.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.view.customContextMenuRequested.connect(self._open_context_menu)

        root.addWidget(self.view, 1)

    # ------ Public API ------
    def selected_record(self):
        """Fiche de la ligne sélectionnée, ou None."""
        rows = self.view.selectionModel().selectedRows()
        if not rows:
            return None
        return self.model.record_at(rows[0].row())

    # ------ Menu contextuel ------
    def _open_context_menu(self, pos):
        menu = QMenu(self)
        a_copy = menu.addAction("Copy")
        a_copy_all = menu.addAction("Copy all")
        act = menu.exec(self.view.viewport().mapToGlobal(pos))
        if not act:
            return
        if act == a_copy:
            self._copy_selection()
        elif act == a_copy_all:
            self._copy_all()

    def _copy_selection(self):
        record = self.selected_record()
        if record is None:
            return
        df = self.model.dataframe()
        row = self.model.row_of(record)
        self._to_clipboard(df.iloc[[row]])

    def _copy_all(self):
        self._to_clipboard(self.model.dataframe())

    def _to_clipboard(self, df):
        df = df.copy()
        df.columns = HEADERS
        text = df.to_csv(sep="\t", index=False)
        QApplication.clipboard().setText(text)
        logger.debug("%d ligne(s) copiée(s) dans le presse-papiers", len(df))
