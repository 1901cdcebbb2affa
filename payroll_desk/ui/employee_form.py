# ui/employee_form.py - champs de saisie + sélecteur de type (PyQt6)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QComboBox, QGridLayout, QLabel, QLineEdit, QWidget

from payroll_desk.logic.employees import EmployeeKind


class EmployeeForm(QWidget):
    """Formulaire de saisie ; ne parse rien, le contrôleur s'en charge."""

    typeChanged = pyqtSignal(object)  # EmployeeKind ou None

    def __init__(self, parent=None):
        super().__init__(parent)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Name")

        self.id_edit = QLineEdit()
        self.id_edit.setPlaceholderText("ID")

        self.amount_edit = QLineEdit()
        self.amount_edit.setPlaceholderText(
            "Monthly Salary (Full-Time) or Hourly Rate (Part-Time)"
        )

        self.hours_edit = QLineEdit()
        self.hours_edit.setPlaceholderText("Hours Worked (Part-Time Only)")
        self.hours_edit.setEnabled(False)

        self.type_combo = QComboBox()
        for kind in EmployeeKind:
            self.type_combo.addItem(kind.label, kind)
        self.type_combo.setPlaceholderText("Select Employee Type")
        self.type_combo.setCurrentIndex(-1)
        self.type_combo.currentIndexChanged.connect(self._on_type_index_changed)

        grid = QGridLayout(self)
        grid.setContentsMargins(10, 10, 10, 10)
        grid.setHorizontalSpacing(10)
        grid.setVerticalSpacing(10)
        rows = [
            ("Name:", self.name_edit),
            ("ID:", self.id_edit),
            ("Salary/Rate:", self.amount_edit),
            ("Hours Worked:", self.hours_edit),
            ("Type:", self.type_combo),
        ]
        for r, (label, widget) in enumerate(rows):
            grid.addWidget(QLabel(label), r, 0)
            grid.addWidget(widget, r, 1)

    def values(self) -> dict:
        """Textes bruts, prêts pour FormController.submit(**values)."""
        return {
            "name": self.name_edit.text(),
            "id_text": self.id_edit.text(),
            "amount_text": self.amount_edit.text(),
            "hours_text": self.hours_edit.text(),
        }

    def set_hours_enabled(self, enabled: bool):
        self.hours_edit.setEnabled(enabled)
        if not enabled:
            self.hours_edit.clear()

    def clear(self):
        """Vide tous les champs et remet le sélecteur sur « aucun type »."""
        for edit in (self.name_edit, self.id_edit, self.amount_edit, self.hours_edit):
            edit.clear()
        self.type_combo.setCurrentIndex(-1)

    def _on_type_index_changed(self, index: int):
        self.typeChanged.emit(self.type_combo.itemData(index) if index >= 0 else None)
