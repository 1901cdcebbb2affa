"""Session applicative : propriétaire unique du roster pour la durée du processus."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .roster import Roster


@dataclass
class Session:
    """Passée explicitement au contrôleur du formulaire et à la table."""

    roster: Roster = field(default_factory=Roster)
    config: Dict[str, Any] = field(default_factory=dict)
