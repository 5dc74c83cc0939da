import random
from dataclasses import replace
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from brkga.chromosome import Individual, random_chromosome
from problems.base_problem import BaseProblem


class Population:
    """
    One generation of individuals.

    After `evaluate` the individuals are ordered by descending fitness. The
    container is immutable: every operation that changes the generation
    returns a new Population.
    """

    def __init__(self, individuals: Sequence[Individual]):
        self.__individuals: Tuple[Individual, ...] = tuple(individuals)

    @classmethod
    def initialize(
        cls,
        problem: BaseProblem,
        size: int,
        rng: random.Random,
        key_range: Tuple[float, float] = (0.001, 0.999)
    ) -> "Population":
        """
        Generates `size` unevaluated individuals with random keys.

        Args:
            problem: Problem providing the per-gene key scales
            size: Population size
            rng: Shared random generator
            key_range: Bounds of the uniform key draw

        Returns:
            Unevaluated population
        """
        scales = problem.key_scales()
        return cls([Individual(random_chromosome(scales, rng, key_range)) for _ in range(size)])

    def evaluate(self, problem: BaseProblem) -> "Population":
        """
        Decodes every unevaluated individual and ranks the generation.

        The sort is stable, so individuals with equal fitness keep their
        previous relative order.
        """
        evaluated = []
        for individual in self.__individuals:
            if not individual.evaluated:
                selection, value = problem.decode(individual.chromosome)
                individual = replace(individual, fitness=value, selection=selection, evaluated=True)
            evaluated.append(individual)
        evaluated.sort(key=lambda ind: ind.fitness, reverse=True)
        return Population(evaluated)

    @property
    def individuals(self) -> Tuple[Individual, ...]:
        return self.__individuals

    @property
    def is_evaluated(self) -> bool:
        return all(ind.evaluated for ind in self.__individuals)

    @property
    def best(self) -> Individual:
        return self.__individuals[0]

    def elites(self, count: int) -> Tuple[Individual, ...]:
        return self.__individuals[:count]

    def fitness_scores(self) -> List[int]:
        return [ind.fitness for ind in self.__individuals]

    def mean_fitness(self) -> float:
        return float(np.mean(self.fitness_scores()))

    def max_fitness(self) -> int:
        return max(self.fitness_scores())

    def __len__(self) -> int:
        return len(self.__individuals)

    def __iter__(self) -> Iterator[Individual]:
        return iter(self.__individuals)

    def __getitem__(self, idx: int) -> Individual:
        return self.__individuals[idx]
