# apps/domain/lymphatic.py

"""
Lymphatic System - Stimulus generator

Produces fresh antibodies by Monte-Carlo search: draw uniform integers in
[0, bound) until one matches the antigen, counting the draws.
"""

import logging
from typing import Optional

import numpy as np

from apps.domain.models import Antibody, Antigen, InvalidAntigenError

logger = logging.getLogger(__name__)

MAX_ANTIGEN_VALUE = 100

# Upper limit on draws per batch, whatever the bound
_BATCH_SIZE = 1024


def validate_value(value: Optional[int], bound: int) -> None:
    """
    Check that value lies in [0, bound)

    Raises:
        InvalidAntigenError: If value is missing or out of range
    """
    if value is None or value < 0 or value >= bound:
        raise InvalidAntigenError(value)


def produce_effort(value: Optional[int], bound: int, rng) -> int:
    """
    Count uniform draws from [0, bound) until one equals value

    Draws are taken in batches of at most _BATCH_SIZE; the first match
    inside a batch gives the same count as drawing one integer at a time.

    Args:
        value: Target value
        bound: Exclusive upper bound of the search space
        rng: numpy Generator (anything with ``integers(low, high, size)``)

    Returns:
        Number of draws, always >= 1

    Raises:
        InvalidAntigenError: If value is missing or outside [0, bound)
        ValueError: If bound is less than 1
    """
    if bound < 1:
        raise ValueError(f"Bound must be at least 1, got {bound}")

    validate_value(value, bound)

    effort = 0
    while True:
        draws = np.asarray(rng.integers(0, bound, size=min(bound, _BATCH_SIZE)))
        hits = np.flatnonzero(draws == value)
        if hits.size:
            return effort + int(hits[0]) + 1
        effort += draws.size


class LymphaticSystem:
    """
    Antibody producer bound to a search space and a random source

    The random source is injected so callers control seeding.
    """

    def __init__(self, max_value: int = MAX_ANTIGEN_VALUE, rng=None):
        if max_value < 1:
            raise ValueError(f"max_value must be at least 1, got {max_value}")
        self.max_value = max_value
        self._rng = rng if rng is not None else np.random.default_rng()

    def produce(self, antigen: Antigen) -> Antibody:
        """
        Produce a fresh antibody for antigen

        Raises:
            InvalidAntigenError: If antigen is outside [0, max_value)
        """
        effort = produce_effort(antigen.value, self.max_value, self._rng)
        logger.debug(f"Produced antibody for {antigen} after {effort} draws")
        return Antibody(antigen=antigen, effort=effort)
