# apps/domain/ports/producer.py

"""
Producer Port - Interface for antibody production
"""

from typing import Protocol

from apps.domain.models import Antibody, Antigen


class IAntibodyProducer(Protocol):
    """
    Interface for producing fresh antibodies

    Implemented by LymphaticSystem; tests may substitute a scripted producer.
    """

    max_value: int

    def produce(self, antigen: Antigen) -> Antibody:
        """
        Produce a fresh antibody

        Args:
            antigen: Antigen to react to

        Returns:
            Antibody with effort > 0

        Raises:
            InvalidAntigenError: If antigen is outside [0, max_value)
        """
        ...
