import random
from abc import ABC, abstractmethod
from typing import Optional

from brkga.chromosome import Chromosome


# abstract base class for all mutation operators
class BaseMutation(ABC):
    def __init__(self, chance: float = 0.05, rng: Optional[random.Random] = None):
        if not 0 <= chance <= 1:
            raise ValueError(f"Mutation chance must be between 0 and 1, got {chance}")
        self._chance = chance
        self._rng = rng if rng is not None else random.Random()

    @property
    def chance(self) -> float:
        return self._chance

    @abstractmethod
    def _mutate(self, offspring: Chromosome, **kwargs) -> Chromosome:
        """
        Performs the actual mutation operation.

        Args:
            offspring: Individual to mutate
            **kwargs: Additional parameters specific to the mutation type

        Returns:
            Mutated offspring, sorted by descending key
        """
        pass

    def perform(self, offspring: Chromosome, **kwargs) -> Chromosome:
        self._validate_offspring(offspring)
        return self._mutate(offspring, **kwargs)

    # one Bernoulli(chance) trial
    def _hit(self) -> bool:
        return self._rng.random() < self._chance

    def _validate_offspring(self, offspring: Chromosome, min_length: int = 1):
        """Validates that offspring has minimum required length"""
        if len(offspring) < min_length:
            raise ValueError(f"Offspring length must be at least {min_length}, got {len(offspring)}")
