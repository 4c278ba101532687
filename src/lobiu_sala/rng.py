from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class RNG:
    """
    Injectable wrapper around random.Random.

    A fixed seed makes grid placement reproducible; ``None`` seeds from system
    entropy. Never touches the module-level ``random`` state.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is None:
            logger.debug("Initialized RNG with non-deterministic seed")
        else:
            logger.debug("Initialized RNG with seed=%s", self.seed)

    def below(self, n: int) -> int:
        """Return a random integer in ``[0, n)``."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return self._rng.randrange(n)

    def choice(self, seq):
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.below(len(seq))]
