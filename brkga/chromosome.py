"""
Random-key chromosomes.

A chromosome is a tuple of genes, one per item, kept sorted by descending key
so decoders can walk it front to back.
"""

import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, NamedTuple, Sequence, Tuple


class Gene(NamedTuple):
    key: float
    index: int


Chromosome = Tuple[Gene, ...]


def sort_genes(genes: Iterable[Gene]) -> Chromosome:
    # descending (key, index): equal keys order by descending index
    return tuple(sorted(genes, reverse=True))


def is_sorted(chromosome: Sequence[Gene]) -> bool:
    return all(a.key >= b.key for a, b in zip(chromosome, chromosome[1:]))


def random_chromosome(
    scales: Sequence[float],
    rng: random.Random,
    key_range: Tuple[float, float] = (0.001, 0.999)
) -> Chromosome:
    """
    Draws a fresh chromosome: the key of gene j is a uniform draw from
    key_range multiplied by scales[j]. Keys are drawn in index order.
    """
    low, high = key_range
    return sort_genes(Gene(rng.uniform(low, high) * scale, j) for j, scale in enumerate(scales))


@dataclass(frozen=True)
class Individual:
    """
    A chromosome tagged with its decoded fitness.

    Fitness and selection are only meaningful once `evaluated` is set.
    """
    chromosome: Chromosome
    fitness: int = 0
    selection: FrozenSet[int] = field(default_factory=frozenset)
    evaluated: bool = False

    def __len__(self) -> int:
        return len(self.chromosome)


def serialize(chromosome: Sequence[Gene]) -> str:
    return " ".join(f"{gene.key!r}:{gene.index}" for gene in chromosome)


def deserialize(line: str) -> Chromosome:
    genes = []
    for token in line.split():
        key, sep, index = token.rpartition(":")
        if not sep:
            raise ValueError(f"Malformed gene token: {token!r}")
        genes.append(Gene(float(key), int(index)))
    return sort_genes(genes)
