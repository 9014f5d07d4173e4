# apps/domain/services/immune_service.py

"""
Immune Service - Orchestrates the response to an antigen

Coordinates the immune store and the lymphatic system to handle the
respond use case.
"""

import logging

from apps.domain.models import Antibody, Antigen
from apps.domain.ports.producer import IAntibodyProducer
from apps.domain.ports.store import IImmuneStore

logger = logging.getLogger(__name__)


class ImmuneService:
    """
    Immune service for reacting to antigens

    Responsibilities:
    - Recall known antigens from the store
    - Produce fresh antibodies for unknown antigens
    - Remember every antigen it has reacted to
    """

    def __init__(self, store: IImmuneStore, lymphatic_system: IAntibodyProducer):
        """
        Initialize immune service

        Args:
            store: Store used to recall and remember antigens
            lymphatic_system: Producer used on a store miss
        """
        self._store = store
        self._lymphatic_system = lymphatic_system

    @property
    def max_value(self) -> int:
        return self._lymphatic_system.max_value

    def respond(self, antigen: Antigen) -> Antibody:
        """
        React to an antigen

        Steps:
        1. Look up the antigen in the store
        2. On a miss, produce a fresh antibody
        3. Save the antibody (no-op if already stored)
        4. Return the antibody

        Args:
            antigen: Antigen to react to

        Returns:
            Antibody with effort 0 if recalled, > 0 if freshly produced

        Raises:
            InvalidAntigenError: If antigen is outside [0, max_value)
        """
        antibody = self._store.find(antigen)

        if antibody is None:
            antibody = self._lymphatic_system.produce(antigen)
            logger.info(f"Produced antibody for antigen {antibody.value} with effort {antibody.effort}")
        else:
            logger.debug(f"Recalled antibody for antigen {antibody.value}")

        self._store.save(antibody)

        return antibody
