# Biased random-key genetic algorithm.
# The class owns the current generation and drives the problem's decoder through Population.
# Crossover and mutation are delegated to operator classes, as in a classic GA.

import random
from enum import Enum
from typing import Callable, Optional

from tqdm import tqdm

from brkga.chromosome import Individual, deserialize, random_chromosome, serialize
from brkga.config import BRKGAConfig
from brkga.crossovers.base_crossover import BaseCrossover
from brkga.crossovers.biased_crossover import BiasedCrossover
from brkga.mutations.base_mutation import BaseMutation
from brkga.mutations.key_mutations import RandomKeyMutation
from brkga.population import Population
from problems.base_problem import BaseProblem


class RunState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    EVOLVING = "evolving"
    DONE = "done"


class BRKGA:
    def __init__(
        self,
        problem: BaseProblem,
        config: Optional[BRKGAConfig] = None,
        crossover: Optional[BaseCrossover] = None,
        mutation: Optional[BaseMutation] = None,
        rng: Optional[random.Random] = None
    ):
        self.__config = config if config is not None else BRKGAConfig()
        self.__config.validate()
        self.__problem = problem
        self.__rng = rng if rng is not None else random.Random(self.__config.seed)
        self.__crossover = crossover if crossover is not None else BiasedCrossover(
            rhoe=self.__config.elite_inheritance, rng=self.__rng
        )
        self.__mutation = mutation if mutation is not None else RandomKeyMutation(
            problem.key_scales(),
            chance=self.__config.mutation_rate,
            key_range=self.__config.key_range,
            rng=self.__rng
        )
        self.__population: Optional[Population] = None
        self.__pop_history = {"mean": [], "max": []}
        self.__state = RunState.UNINITIALIZED

    @property
    def config(self) -> BRKGAConfig:
        return self.__config

    @property
    def state(self) -> RunState:
        return self.__state

    # population getter
    @property
    def population(self) -> Population:
        self.__require_population()
        return self.__population

    @property
    def population_size(self) -> int:
        return self.__config.population_size

    # pop_history holds the mean and max fitness of every generation produced by start()
    @property
    def history(self) -> dict:
        return self.__pop_history

    # generates (or adopts) the first generation and ranks it
    def init_population(self, initial_pop: Optional[Population] = None):
        if initial_pop is None:
            initial_pop = Population.initialize(
                self.__problem, self.__config.population_size, self.__rng, self.__config.key_range
            )
        elif len(initial_pop) != self.__config.population_size:
            raise ValueError(
                f"Initial population has {len(initial_pop)} individuals, "
                f"expected {self.__config.population_size}"
            )
        self.__population = initial_pop.evaluate(self.__problem)
        self.__pop_history = {"mean": [], "max": []}
        self.__state = RunState.INITIALIZED

    def __require_population(self):
        if self.__state is RunState.UNINITIALIZED:
            raise RuntimeError("Population is not initialized, call init_population() first")

    def __new_mutant(self) -> Individual:
        return Individual(random_chromosome(
            self.__problem.key_scales(), self.__rng, self.__config.key_range
        ))

    # one parent from the elite set, one from the rest of the previous generation
    def __select_parents(self, population: Population) -> tuple:
        elite_count = self.__config.elite_count
        elite = population[self.__rng.randint(0, elite_count - 1)]
        non_elite = population[self.__rng.randint(elite_count, len(population) - 1)]
        return elite.chromosome, non_elite.chromosome

    # performs crossover k-times, generates offsprings
    def __perform_crossover(self, population: Population, k: int):
        for _ in range(k):
            elite, non_elite = self.__select_parents(population)
            yield self.__crossover.perform(elite, non_elite)

    def __perform_mutation(self, offsprings):
        for offspring in offsprings:
            yield self.__mutation.perform(offspring)

    def evolve(self, population: Population) -> Population:
        """
        Builds and ranks the generation that follows `population`.

        Args:
            population: Evaluated generation, sorted by descending fitness

        Returns:
            New evaluated generation of the same size
        """
        self.__require_population()
        cfg = self.__config
        new_population = list(population.elites(cfg.elite_count))
        new_population += [self.__new_mutant() for _ in range(cfg.mutant_count)]

        offsprings = self.__perform_crossover(population, cfg.crossover_count)
        new_population += [Individual(c) for c in self.__perform_mutation(offsprings)]

        return Population(new_population).evaluate(self.__problem)

    # prints the fitness of the best individuals of the current generation
    def print_population(self, generation: int, top: int = 10):
        lines = [f"\nGeneration {generation}:"]
        for i, individual in enumerate(self.population.elites(top)):
            lines.append(f"Chromosome {i + 1} | Fitness: {individual.fitness}")
        tqdm.write("\n".join(lines))

    def save_population(self, filename: str):
        with open(filename, "w") as f:
            for individual in self.population:
                f.write(f"{serialize(individual.chromosome)}\n")

    # loaded chromosomes are decoded again, the file only stores keys
    def load_population(self, filename: str):
        with open(filename, "r") as f:
            chromosomes = [deserialize(line) for line in f.readlines() if line.strip()]

        expected = list(range(self.__problem.num_genes))
        for i, chromosome in enumerate(chromosomes):
            if sorted(gene.index for gene in chromosome) != expected:
                raise ValueError(
                    f"Line {i + 1} of {filename} is not a chromosome over "
                    f"{self.__problem.num_genes} genes"
                )
        self.init_population(Population([Individual(c) for c in chromosomes]))

    def best_solution(self) -> dict:
        best = self.population.best
        return {"fitness": best.fitness, "selection": sorted(best.selection)}

    # runs exactly `generations` generations (config.generations by default)
    # and returns the best individual
    def start(
        self,
        generations: Optional[int] = None,
        save_interval: Optional[int] = None,
        save_filename: str = "population.txt",
        callback: Optional[Callable] = None,
        verbose: bool = True,
        show_population: bool = False
    ) -> Individual:
        self.__require_population()
        if generations is None:
            generations = self.__config.generations
        if generations < 0:
            raise ValueError(f"Number of generations must be non-negative, got {generations}")

        self.__state = RunState.EVOLVING
        progress = tqdm(range(1, generations + 1), desc="Generations", disable=not verbose)
        for i in progress:
            self.__population = self.evolve(self.__population)
            self.__pop_history["mean"].append(self.__population.mean_fitness())
            self.__pop_history["max"].append(self.__population.max_fitness())

            if verbose:
                progress.set_postfix(best=self.__pop_history["max"][-1],
                                     mean=f"{self.__pop_history['mean'][-1]:.2f}")
            if show_population:
                self.print_population(i)
            if save_interval and i % save_interval == 0:
                self.save_population(save_filename)
            if callback is not None:
                callback(self, i)

        self.__state = RunState.DONE
        return self.__population.best
