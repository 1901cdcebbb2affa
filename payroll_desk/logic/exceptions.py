"""Exceptions métier remontées par le formulaire et le roster.

Les deux erreurs sont terminales pour l'action en cours mais jamais pour
l'application : la fenêtre les traduit en notice modale puis reste utilisable.
"""

from typing import Optional

INVALID_INPUT_MESSAGE = "Invalid input. Please check your entries."
NO_TYPE_MESSAGE = "Please select an employee type."
NO_ROW_MESSAGE = "No employee selected."


class PayrollDeskError(Exception):
    """Base exception for user-facing errors."""


class InvalidInput(PayrollDeskError):
    """Raised when a form field cannot be parsed (or a required field is empty)."""

    def __init__(self, field: Optional[str] = None, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message)
        self.field = field
        self.message = message


class NoSelection(PayrollDeskError):
    """Raised when an action needs a selection that is missing.

    ``target`` vaut ``"type"`` (aucun type d'employé choisi à l'ajout) ou
    ``"row"`` (aucune ligne sélectionnée à la suppression).
    """

    def __init__(self, target: str = "row", message: Optional[str] = None):
        if message is None:
            message = NO_TYPE_MESSAGE if target == "type" else NO_ROW_MESSAGE
        super().__init__(message)
        self.target = target
        self.message = message
