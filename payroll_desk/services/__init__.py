# services/__init__.py
"""Services en mémoire : roster, session applicative et contrôleur du formulaire."""

from .roster import Roster
from .session import Session
from .form_controller import FormController

__all__ = ["Roster", "Session", "FormController"]
