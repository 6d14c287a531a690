# ============================================================================
# src/prescription_ingestion/checkers/interaction_checker.py
# ============================================================================
"""
Drug Interaction Checker

Screens a list of drug names against the known-interaction table.
An entry is reported when any supplied name contains either drug of the
pair (case-insensitive substring), so "Warfarin 5mg" still matches.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..constants.interaction_db import KNOWN_INTERACTIONS, KnownInteraction
from ..models.prescription import Interaction, Severity


class DrugInteractionChecker:

    def __init__(self, known_interactions: Optional[Sequence[KnownInteraction]] = None):
        self.known_interactions = list(known_interactions or KNOWN_INTERACTIONS)
        self.logger = logging.getLogger(__name__)

    def check(self, drugs: Iterable[str]) -> List[Interaction]:
        """
        Find known interactions for the supplied drugs.

        Args:
            drugs: Drug names as entered; blank entries are ignored

        Returns:
            Matching interactions in table order
        """
        names = [d.strip().lower() for d in drugs if d and d.strip()]
        if not names:
            return []

        found = [
            Interaction(
                severity=Severity(known.severity),
                description=known.description,
                drugs=(known.drug1, known.drug2),
            )
            for known in self.known_interactions
            if any(known.drug1 in name or known.drug2 in name for name in names)
        ]

        self.logger.info(f"Found {len(found)} potential interactions for {len(names)} drugs")
        return found


def check_interactions(drugs: Iterable[str]) -> List[Interaction]:
    return DrugInteractionChecker().check(drugs)
