from brkga.chromosome import Chromosome, Gene, Individual, random_chromosome, sort_genes
from brkga.config import BRKGAConfig
from brkga.ga import BRKGA, RunState
from brkga.population import Population

__version__ = "0.1.0"

__all__ = [
    'BRKGA',
    'BRKGAConfig',
    'Chromosome',
    'Gene',
    'Individual',
    'Population',
    'RunState',
    'random_chromosome',
    'sort_genes',
]
