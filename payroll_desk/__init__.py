"""Payroll Desk - saisie d'employés (temps plein / temps partiel) et calcul de la paie.

Le paquet est découpé comme suit :

- ``logic``    : modèle des fiches employé, calcul de la paie, formatage
- ``services`` : roster en mémoire, session, contrôleur du formulaire
- ``utils``    : parsing des champs texte
- ``ui``       : fenêtre PyQt6 (formulaire, table, notices)
- ``config``   : bootstrap de l'environnement et du logging
"""

__version__ = "1.0.0"
