"""
Tests for random-key chromosomes, biased crossover and key mutation.
"""

import random
import unittest

from brkga.chromosome import (
    Gene,
    deserialize,
    is_sorted,
    random_chromosome,
    serialize,
    sort_genes,
)
from brkga.crossovers import BiasedCrossover
from brkga.mutations import RandomKeyMutation


SCALES = (2.0, 10.0, 5.0, 1.5, 8.0, 0.5, 3.0, 7.0)


def indices(chromosome):
    return sorted(gene.index for gene in chromosome)


class TestChromosome(unittest.TestCase):
    """Test chromosome construction."""

    def test_random_chromosome(self):
        chromosome = random_chromosome(SCALES, random.Random(1))
        self.assertEqual(len(chromosome), len(SCALES))
        self.assertEqual(indices(chromosome), list(range(len(SCALES))))
        self.assertTrue(is_sorted(chromosome))
        for gene in chromosome:
            scale = SCALES[gene.index]
            self.assertTrue(0.001 * scale <= gene.key <= 0.999 * scale)

    def test_same_seed_same_chromosome(self):
        a = random_chromosome(SCALES, random.Random(9))
        b = random_chromosome(SCALES, random.Random(9))
        self.assertEqual(a, b)

    def test_sort_genes_descending(self):
        genes = [Gene(0.2, 0), Gene(0.9, 1), Gene(0.5, 2)]
        self.assertEqual([g.index for g in sort_genes(genes)], [1, 2, 0])

    def test_serialize(self):
        chromosome = random_chromosome(SCALES, random.Random(2))
        self.assertEqual(deserialize(serialize(chromosome)), chromosome)

    def test_deserialize_malformed(self):
        with self.assertRaises(ValueError):
            deserialize("0.5:1 0.25")


class TestBiasedCrossover(unittest.TestCase):
    """Test elite-biased crossover."""

    def setUp(self):
        rng = random.Random(4)
        self.elite = random_chromosome(SCALES, rng)
        self.non_elite = random_chromosome(SCALES, rng)

    def test_full_inheritance_copies_elite(self):
        crossover = BiasedCrossover(rhoe=1.0, rng=random.Random(0))
        self.assertEqual(crossover.perform(self.elite, self.non_elite), self.elite)

    def test_offspring_keeps_one_gene_per_item(self):
        crossover = BiasedCrossover(rhoe=0.5, rng=random.Random(0))
        for _ in range(20):
            offspring = crossover.perform(self.elite, self.non_elite)
            self.assertEqual(indices(offspring), list(range(len(SCALES))))
            self.assertTrue(is_sorted(offspring))

    def test_keys_come_from_parents(self):
        crossover = BiasedCrossover(rhoe=0.0, rng=random.Random(3))
        offspring = crossover.perform(self.elite, self.non_elite)
        parent_keys = {g.key for g in self.elite} | {g.key for g in self.non_elite}
        for gene in offspring:
            self.assertIn(gene.key, parent_keys)
        # position 0 precedes every cut point, so the elite's first gene survives
        self.assertIn(self.elite[0], offspring)

    def test_single_gene(self):
        crossover = BiasedCrossover(rng=random.Random(0))
        elite = (Gene(0.4, 0),)
        self.assertEqual(crossover.perform(elite, (Gene(0.9, 0),)), elite)

    def test_length_mismatch(self):
        crossover = BiasedCrossover(rng=random.Random(0))
        with self.assertRaises(ValueError):
            crossover.perform(self.elite, self.non_elite[:-1])

    def test_invalid_rhoe(self):
        with self.assertRaises(ValueError):
            BiasedCrossover(rhoe=1.5)


class TestRandomKeyMutation(unittest.TestCase):
    """Test per-gene key mutation."""

    def setUp(self):
        self.chromosome = random_chromosome(SCALES, random.Random(8))

    def test_zero_chance_keeps_keys(self):
        mutation = RandomKeyMutation(SCALES, chance=0.0, rng=random.Random(0))
        self.assertEqual(mutation.perform(self.chromosome), self.chromosome)

    def test_full_chance_redraws_every_key(self):
        mutation = RandomKeyMutation(SCALES, chance=1.0, rng=random.Random(0))
        mutated = mutation.perform(self.chromosome)
        self.assertTrue(is_sorted(mutated))
        self.assertEqual(indices(mutated), list(range(len(SCALES))))
        self.assertFalse({g.key for g in mutated} & {g.key for g in self.chromosome})
        for gene in mutated:
            scale = SCALES[gene.index]
            self.assertTrue(0.001 * scale <= gene.key <= 0.999 * scale)

    def test_invalid_chance(self):
        with self.assertRaises(ValueError):
            RandomKeyMutation(SCALES, chance=-0.1)

    def test_empty_offspring(self):
        mutation = RandomKeyMutation(SCALES, rng=random.Random(0))
        with self.assertRaises(ValueError):
            mutation.perform(())


if __name__ == '__main__':
    unittest.main()
