from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class BRKGAConfig:
    """
    Parameters of a BRKGA run. Defaults are the classic settings used for
    the knapsack benchmarks.

    Attributes:
        population_size: Number of individuals P
        elite_fraction: Share of the population kept as elite (pe)
        mutant_fraction: Share of the population replaced by random mutants (pm)
        elite_inheritance: Probability of inheriting a key from the elite parent (rhoe)
        generations: Number of generations G
        mutation_rate: Per-gene probability of redrawing a key in crossover offspring
        key_range: Bounds of the uniform draw for a fresh key
        seed: Seed of the shared random generator, None for OS entropy
    """
    population_size: int = 100
    elite_fraction: float = 0.3
    mutant_fraction: float = 0.2
    elite_inheritance: float = 0.7
    generations: int = 200
    mutation_rate: float = 0.05
    key_range: Tuple[float, float] = (0.001, 0.999)
    seed: Optional[int] = None

    @property
    def elite_count(self) -> int:
        return int(self.population_size * self.elite_fraction)

    @property
    def mutant_count(self) -> int:
        return int(self.population_size * self.mutant_fraction)

    @property
    def crossover_count(self) -> int:
        return self.population_size - self.elite_count - self.mutant_count

    def validate(self):
        if self.population_size < 2:
            raise ValueError(f"Population size must be at least 2, got {self.population_size}")
        for name in ("elite_fraction", "mutant_fraction", "elite_inheritance", "mutation_rate"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be between 0 and 1, got {value}")
        if self.elite_fraction + self.mutant_fraction > 1:
            raise ValueError(
                f"elite_fraction + mutant_fraction must not exceed 1, "
                f"got {self.elite_fraction} + {self.mutant_fraction}"
            )
        if self.elite_count < 1:
            raise ValueError(
                f"Elite set is empty: {self.population_size} * {self.elite_fraction} < 1"
            )
        if self.generations < 0:
            raise ValueError(f"Number of generations must be non-negative, got {self.generations}")
        low, high = self.key_range
        if not 0 <= low < high:
            raise ValueError(f"Invalid key range: {self.key_range}")
