# services/roster.py - collection ordonnée des fiches employé de la session
from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional

import pandas as pd

from payroll_desk.logic.employees import EmployeeRecord, pay
from payroll_desk.logic.exceptions import NoSelection

logger = logging.getLogger(__name__)

COLUMNS = ["name", "id", "kind", "pay"]

Listener = Callable[["Roster"], None]


class Roster:
    """
    Roster en mémoire :
    - ordre d'insertion conservé, jamais trié ni dédoublonné
    - suppression par identité (``is``), pas par égalité de valeur
    - les listeners sont appelés après chaque mutation réussie ; l'affichage
      se redessine à partir de ``list()``
    """

    def __init__(self, records: Optional[Iterable[EmployeeRecord]] = None):
        self._records: List[EmployeeRecord] = list(records or [])
        self._listeners: List[Listener] = []

    # ------ Mutations ------
    def add(self, record: EmployeeRecord) -> None:
        self._records.append(record)
        logger.info(
            "Employé ajouté: %s (id=%s, %s)", record.name, record.id, record.kind.label
        )
        self._notify()

    def remove(self, record: Optional[EmployeeRecord]) -> None:
        if record is None:
            raise NoSelection("row")
        for idx, current in enumerate(self._records):
            if current is record:
                del self._records[idx]
                logger.info("Employé retiré: %s (id=%s)", record.name, record.id)
                self._notify()
                return
        raise NoSelection("row")

    # ------ Lecture ------
    def list(self) -> List[EmployeeRecord]:
        """Instantané de la vue ordonnée courante."""
        return self._records.copy()

    def total_pay(self) -> float:
        return sum(pay(r) for r in self._records)

    def to_dataframe(self) -> pd.DataFrame:
        rows = [(r.name, r.id, r.kind.label, pay(r)) for r in self._records]
        return pd.DataFrame(rows, columns=COLUMNS)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EmployeeRecord]:
        return iter(self._records.copy())

    def __contains__(self, record) -> bool:
        return any(current is record for current in self._records)

    # ------ Observateurs ------
    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self) -> None:
        for listener in self._listeners.copy():
            listener(self)
