from brkga.crossovers.base_crossover import BaseCrossover
from brkga.crossovers.biased_crossover import BiasedCrossover

__all__ = ['BaseCrossover', 'BiasedCrossover']
