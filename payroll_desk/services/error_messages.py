#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Module de traduction des erreurs en notices utilisateur (titre, message, gravité)
"""
import logging
from typing import Tuple

from payroll_desk.logic.exceptions import InvalidInput, NoSelection

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

_FIELD_LABELS = {
    "name": "Name",
    "id": "ID",
    "monthly_salary": "Salary/Rate",
    "hourly_rate": "Salary/Rate",
    "hours_worked": "Hours Worked",
}


def translate_error(error: Exception) -> Tuple[str, str, str]:
    """
    Traduit une exception en notice affichable.

    Args:
        error: Exception levée par le contrôleur ou le roster

    Returns:
        Tuple (titre, message, gravité) ; gravité vaut "error" ou "warning"
    """
    if isinstance(error, InvalidInput):
        message = error.message
        label = _FIELD_LABELS.get(error.field or "")
        if label:
            message = f"{message}\n\nField: {label}"
        return "Invalid input", message, SEVERITY_ERROR

    if isinstance(error, NoSelection):
        return "No selection", error.message, SEVERITY_WARNING

    # Erreur imprévue : on la journalise avec la trace, l'utilisateur voit un message générique
    logger.error(
        "Erreur inattendue: %s", error, exc_info=(type(error), error, error.__traceback__)
    )
    return "Error", f"Unexpected error: {error}", SEVERITY_ERROR
