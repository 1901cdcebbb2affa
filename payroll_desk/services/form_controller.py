# services/form_controller.py - machine à états du formulaire (sans Qt)
from __future__ import annotations

import logging
from typing import Optional, Union

from payroll_desk.logic.employees import (
    EmployeeKind,
    EmployeeRecord,
    make_hourly,
    make_salaried,
)
from payroll_desk.logic.exceptions import InvalidInput, NoSelection
from payroll_desk.utils.parsers import (
    parse_float_field,
    parse_int_field,
    parse_name_field,
)

from .session import Session

logger = logging.getLogger(__name__)


class FormController:
    """
    Contrôleur du formulaire d'ajout.

    Deux états : aucun type choisi (``kind is None``) ou type choisi.
    Seul l'état « temps partiel » active le champ des heures travaillées.
    Une action échouée ne modifie ni le roster ni l'état du formulaire.
    """

    def __init__(self, session: Session):
        self.session = session
        self._kind: Optional[EmployeeKind] = None

    @property
    def kind(self) -> Optional[EmployeeKind]:
        return self._kind

    @property
    def hours_enabled(self) -> bool:
        return self._kind is EmployeeKind.HOURLY

    def select_type(self, kind: Union[EmployeeKind, str, None]) -> bool:
        """Change le type sélectionné ; retourne True si les heures sont saisissables."""
        self._kind = EmployeeKind.from_label(kind)
        logger.debug("Type sélectionné: %s", self._kind.label if self._kind else None)
        return self.hours_enabled

    def reset(self) -> None:
        self._kind = None

    def submit(
        self, name, id_text, amount_text, hours_text=None
    ) -> EmployeeRecord:
        """
        Construit la fiche depuis les champs texte et l'ajoute au roster.

        Args:
            name: nom (texte libre, non vide)
            id_text: identifiant (entier)
            amount_text: salaire mensuel (temps plein) ou taux horaire (temps partiel)
            hours_text: heures travaillées, lu seulement en temps partiel

        Returns:
            La fiche ajoutée. Le formulaire revient à l'état « aucun type ».

        Raises:
            NoSelection: aucun type d'employé choisi
            InvalidInput: champ vide ou non numérique
        """
        kind = self._kind
        if kind is None:
            logger.warning("Ajout refusé: aucun type d'employé sélectionné")
            raise NoSelection("type")

        try:
            parsed_name = parse_name_field(name)
            parsed_id = parse_int_field(id_text, "id")
            amount = parse_float_field(
                amount_text,
                "monthly_salary" if kind is EmployeeKind.SALARIED else "hourly_rate",
            )
            if kind is EmployeeKind.HOURLY:
                hours = parse_int_field(hours_text, "hours_worked")
        except InvalidInput as exc:
            logger.warning("Ajout refusé: champ invalide '%s'", exc.field)
            raise

        if kind is EmployeeKind.HOURLY:
            record = make_hourly(parsed_name, parsed_id, hours, amount)
        else:
            record = make_salaried(parsed_name, parsed_id, amount)

        self.session.roster.add(record)
        self.reset()
        return record

    def remove(self, record: Optional[EmployeeRecord]) -> None:
        """Retire la fiche sélectionnée ; NoSelection si rien n'est sélectionné."""
        try:
            self.session.roster.remove(record)
        except NoSelection:
            logger.warning("Suppression refusée: aucun employé sélectionné")
            raise
