import random
from abc import ABC, abstractmethod
from typing import Optional

from brkga.chromosome import Chromosome


# abstract base class for all crossover operators
class BaseCrossover(ABC):
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    @abstractmethod
    def perform(self, parent1: Chromosome, parent2: Chromosome, **kwargs) -> Chromosome:
        """
        Performs crossover on two parents and returns offspring.

        Args:
            parent1: First parent
            parent2: Second parent
            **kwargs: Additional parameters specific to the crossover type

        Returns:
            Offspring chromosome
        """
        pass

    def _validate_parents(self, parent1: Chromosome, parent2: Chromosome):
        """Validates that parents have the same length"""
        if len(parent1) != len(parent2):
            raise ValueError(f"Parents' length should be the same! You have: {len(parent1)} and {len(parent2)}")
