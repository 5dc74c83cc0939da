import random
from typing import Optional

from brkga.chromosome import Chromosome, Gene, sort_genes
from brkga.crossovers.base_crossover import BaseCrossover


# biased crossover - elite parent wins each gene past a random cut with probability rhoe
class BiasedCrossover(BaseCrossover):
    def __init__(self, rhoe: float = 0.7, rng: Optional[random.Random] = None):
        super().__init__(rng)
        if not 0 <= rhoe <= 1:
            raise ValueError(f"Inheritance probability must be between 0 and 1, got {rhoe}")
        self.__rhoe = rhoe

    @property
    def rhoe(self) -> float:
        return self.__rhoe

    def perform(self, parent1: Chromosome, parent2: Chromosome, **kwargs) -> Chromosome:
        """
        parent1 is the elite parent, parent2 the non-elite one. Positions before
        the cut are copied from parent1. Past the cut each position keeps
        parent1's item index and takes the key of either parent.
        """
        self._validate_parents(parent1, parent2)
        rhoe = kwargs.get('rhoe', self.__rhoe)

        offspring = list(parent1)
        if len(parent1) < 2:
            return tuple(offspring)

        cut = self._rng.randint(1, len(parent1) - 1)
        for i in range(cut, len(parent1)):
            if self._rng.random() >= rhoe:
                offspring[i] = Gene(parent2[i].key, parent1[i].index)

        return sort_genes(offspring)
