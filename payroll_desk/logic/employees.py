# logic/employees.py - fiches employé (temps plein / temps partiel) et calcul de la paie
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union


class EmployeeKind(str, Enum):
    """Type d'employé, avec le libellé affiché dans le sélecteur."""

    SALARIED = "Full-Time"
    HOURLY = "Part-Time"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["EmployeeKind"]:
        """Retourne le type correspondant au libellé, ou None (aucun choix)."""
        if label is None:
            return None
        if isinstance(label, cls):
            return label
        text = str(label).strip()
        if not text:
            return None
        for kind in cls:
            if text == kind.value or text.upper() == kind.name:
                return kind
        raise ValueError(f"Type d'employé inconnu: {label!r}")


@dataclass(frozen=True)
class SalariedEmployee:
    """Employé à temps plein : la paie est le salaire mensuel stocké."""

    name: str
    id: int
    monthly_salary: float

    kind: ClassVar[EmployeeKind] = EmployeeKind.SALARIED


@dataclass(frozen=True)
class HourlyEmployee:
    """Employé à temps partiel : la paie vaut heures x taux horaire."""

    name: str
    id: int
    hours_worked: int
    hourly_rate: float

    kind: ClassVar[EmployeeKind] = EmployeeKind.HOURLY


EmployeeRecord = Union[SalariedEmployee, HourlyEmployee]


def make_salaried(name: str, id: int, monthly_salary: float) -> SalariedEmployee:
    # aucune validation de signe : zéro et négatif sont conservés tels quels
    return SalariedEmployee(name=name, id=id, monthly_salary=monthly_salary)


def make_hourly(
    name: str, id: int, hours_worked: int, hourly_rate: float
) -> HourlyEmployee:
    return HourlyEmployee(
        name=name, id=id, hours_worked=hours_worked, hourly_rate=hourly_rate
    )


def pay(record: EmployeeRecord) -> float:
    """
    Calcule la paie courante d'une fiche.

    Recalculée à chaque lecture (jamais mise en cache).

    Args:
        record: SalariedEmployee ou HourlyEmployee

    Returns:
        float: salaire mensuel, ou heures x taux pour un employé horaire
    """
    if isinstance(record, SalariedEmployee):
        return float(record.monthly_salary)
    if isinstance(record, HourlyEmployee):
        return float(record.hours_worked * record.hourly_rate)
    raise TypeError(f"Fiche employé non supportée: {type(record).__name__}")
