"""Utilities for parsing the text fields of the employee form.
Kept out of the widgets so the parsing rules are testable without Qt.
"""

import math
import re

from payroll_desk.logic.exceptions import InvalidInput

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# bornes d'un entier signé 32 bits
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).replace("\u202F", "").replace("\u00A0", "").strip()


def parse_name_field(value, field: str = "name") -> str:
    """Texte libre ; seul le champ vide est refusé."""
    text = "" if value is None else str(value).strip()
    if not text:
        raise InvalidInput(field)
    return text


def parse_int_field(value, field: str) -> int:
    """
    Parse un entier signé (ID, heures travaillées).
    Refuse les décimales ("10.5"), les séparateurs, le texte vide et les
    valeurs hors de l'intervalle INT_MIN..INT_MAX.
    """
    if isinstance(value, bool):
        raise InvalidInput(field)
    if isinstance(value, int):
        result = value
    else:
        text = _clean(value)
        if not _INT_RE.match(text):
            raise InvalidInput(field)
        # au-delà de 10 chiffres significatifs, hors bornes : int() jamais appelé
        if len(text.lstrip("+-").lstrip("0")) > 10:
            raise InvalidInput(field)
        result = int(text)

    if not INT_MIN <= result <= INT_MAX:
        raise InvalidInput(field)
    return result


def parse_float_field(value, field: str) -> float:
    """
    Parse un montant (salaire mensuel ou taux horaire).

    Accepte la virgule comme séparateur décimal ("12,5") quand elle est seule.
    Retourne un float fini, sinon lève InvalidInput.
    """
    if isinstance(value, bool):
        raise InvalidInput(field)
    if isinstance(value, (int, float)):
        try:
            result = float(value)
        except OverflowError:
            raise InvalidInput(field) from None
    else:
        text = _clean(value)
        if not text:
            raise InvalidInput(field)
        if text.count(",") == 1 and "." not in text:
            text = text.replace(",", ".")
        # chiffres ASCII uniquement, sans "_" ni "nan"/"inf"
        if not _FLOAT_RE.match(text):
            raise InvalidInput(field)
        result = float(text)

    if not math.isfinite(result):
        raise InvalidInput(field)
    return result
