from abc import ABC, abstractmethod
from typing import FrozenSet, Sequence, Tuple


class BaseProblem(ABC):
    """Abstract base class for problems solved with random-key chromosomes"""

    @property
    @abstractmethod
    def num_genes(self) -> int:
        """Number of genes (random keys) in a chromosome"""
        pass

    @abstractmethod
    def key_scales(self) -> Sequence[float]:
        """
        Returns the factor every freshly drawn key is multiplied by.

        Returns:
            One scale per gene index
        """
        pass

    @abstractmethod
    def decode(self, chromosome: Sequence) -> Tuple[FrozenSet[int], int]:
        """
        Maps a chromosome to a feasible solution.

        Args:
            chromosome: Genes sorted by descending key

        Returns:
            Selected gene indices and the objective value (higher is better)
        """
        pass

    @abstractmethod
    def problem_name(self) -> str:
        """Returns the name of the problem"""
        pass

    def __str__(self) -> str:
        return self.problem_name()
