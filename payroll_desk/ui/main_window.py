# ui/main_window.py - MainWindow PyQt6 : formulaire + boutons + table du roster
from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from payroll_desk.config.settings import DEFAULT_WINDOW_SIZE, DEFAULT_WINDOW_TITLE
from payroll_desk.logic.exceptions import PayrollDeskError
from payroll_desk.logic.formatting import fmt_count, fmt_money
from payroll_desk.services.error_messages import SEVERITY_WARNING, translate_error
from payroll_desk.services.form_controller import FormController
from payroll_desk.services.session import Session

from .employee_form import EmployeeForm
from .table_panel import RosterTablePanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, session: Session, parent=None):
        super().__init__(parent)
        self.session = session
        self.controller = FormController(session)
        cfg = session.config

        self.setWindowTitle(cfg.get("window_title", DEFAULT_WINDOW_TITLE))
        self.resize(
            cfg.get("window_width", DEFAULT_WINDOW_SIZE[0]),
            cfg.get("window_height", DEFAULT_WINDOW_SIZE[1]),
        )

        # Formulaire
        self.form = EmployeeForm(self)
        self.form.typeChanged.connect(self._on_type_changed)

        # Boutons d'action
        self.btn_add = QPushButton("Add Employee")
        self.btn_remove = QPushButton("Remove Employee")
        self.btn_add.clicked.connect(self.on_add)
        self.btn_remove.clicked.connect(self.on_remove)

        btns = QHBoxLayout()
        btns.setSpacing(10)
        btns.addWidget(self.btn_add)
        btns.addWidget(self.btn_remove)
        btns.addStretch(1)

        # Table (re-rendue par le roster lui-même)
        self.table = RosterTablePanel(session.roster, self)

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)
        root.addWidget(self.form)
        root.addLayout(btns)
        root.addWidget(self.table, 1)
        self.setCentralWidget(central)

        # Barre d'état : effectif + masse salariale
        self.summary_label = QLabel()
        self.statusBar().addPermanentWidget(self.summary_label)
        session.roster.subscribe(self._update_summary)
        self._update_summary(session.roster)

    # ------ Actions ------
    def on_add(self):
        try:
            self.controller.submit(**self.form.values())
        except PayrollDeskError as exc:
            self.show_notice(exc)
            return
        self.form.clear()

    def on_remove(self):
        try:
            self.controller.remove(self.table.selected_record())
        except PayrollDeskError as exc:
            self.show_notice(exc)

    def show_notice(self, error: Exception):
        """Notice modale bloquante ; le formulaire reste utilisable ensuite."""
        title, message, severity = translate_error(error)
        logger.debug("Notice affichée: %s - %s", title, message)
        if severity == SEVERITY_WARNING:
            QMessageBox.warning(self, title, message)
        else:
            QMessageBox.critical(self, title, message)

    # ------ Internes ------
    def _on_type_changed(self, kind):
        self.form.set_hours_enabled(self.controller.select_type(kind))

    def _update_summary(self, roster):
        self.summary_label.setText(
            f"{fmt_count(len(roster))} - Total pay: {fmt_money(roster.total_pay())}"
        )

    def closeEvent(self, e):
        self.session.roster.unsubscribe(self._update_summary)
        self.table.model.detach()
        return super().closeEvent(e)
