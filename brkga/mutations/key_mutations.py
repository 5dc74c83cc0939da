import random
from typing import Optional, Sequence, Tuple

from brkga.chromosome import Chromosome, Gene, sort_genes
from brkga.mutations.base_mutation import BaseMutation


# random key mutation - every gene is redrawn independently with probability `chance`
class RandomKeyMutation(BaseMutation):
    def __init__(
        self,
        scales: Sequence[float],
        chance: float = 0.05,
        key_range: Tuple[float, float] = (0.001, 0.999),
        rng: Optional[random.Random] = None
    ):
        super().__init__(chance, rng)
        self.__scales = tuple(scales)
        self.__key_range = key_range

    def _mutate(self, offspring: Chromosome, **kwargs) -> Chromosome:
        low, high = self.__key_range
        genes = []
        for gene in offspring:
            if self._hit():
                gene = Gene(self._rng.uniform(low, high) * self.__scales[gene.index], gene.index)
            genes.append(gene)
        return sort_genes(genes)
