"""
Tests for population initialization, evaluation and ranking.
"""

import random
import unittest

from brkga.chromosome import Gene, Individual, is_sorted
from brkga.population import Population
from problems import Item, KnapsackProblem


class CountingKnapsack(KnapsackProblem):
    """Knapsack problem that counts decoder calls."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = 0

    def decode(self, chromosome):
        self.calls += 1
        return super().decode(chromosome)


class TestPopulation(unittest.TestCase):

    def setUp(self):
        self.problem = KnapsackProblem.random(num_items=25, capacity=80, seed=2)

    def test_initialize(self):
        population = Population.initialize(self.problem, 30, random.Random(0))
        self.assertEqual(len(population), 30)
        self.assertFalse(population.is_evaluated)
        for individual in population:
            self.assertEqual(individual.fitness, 0)
            self.assertEqual(len(individual), 25)
            self.assertTrue(is_sorted(individual.chromosome))

    def test_evaluate_ranks_by_fitness(self):
        population = Population.initialize(self.problem, 30, random.Random(0)).evaluate(self.problem)
        self.assertTrue(population.is_evaluated)
        scores = population.fitness_scores()
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertEqual(population.best.fitness, population.max_fitness())
        for individual in population:
            selection, value = self.problem.decode(individual.chromosome)
            self.assertEqual(individual.fitness, value)
            self.assertEqual(individual.selection, selection)

    def test_evaluate_returns_new_population(self):
        population = Population.initialize(self.problem, 5, random.Random(0))
        evaluated = population.evaluate(self.problem)
        self.assertIsNot(population, evaluated)
        self.assertFalse(population.is_evaluated)

    def test_ties_keep_previous_order(self):
        def ind(idx, fitness):
            return Individual((Gene(0.5, idx),), fitness=fitness, evaluated=True)

        problem = KnapsackProblem([Item(1, 1)] * 4, capacity=1)
        population = Population([ind(0, 5), ind(1, 7), ind(2, 5), ind(3, 7)]).evaluate(problem)
        order = [individual.chromosome[0].index for individual in population]
        self.assertEqual(order, [1, 3, 0, 2])

    def test_evaluated_individuals_are_not_decoded_again(self):
        problem = CountingKnapsack(self.problem.items, self.problem.capacity)
        population = Population.initialize(problem, 10, random.Random(1)).evaluate(problem)
        self.assertEqual(problem.calls, 10)
        population.evaluate(problem)
        self.assertEqual(problem.calls, 10)

    def test_statistics(self):
        population = Population([
            Individual((Gene(0.1, 0),), fitness=f, evaluated=True) for f in (9, 6, 3)
        ])
        self.assertEqual(population.max_fitness(), 9)
        self.assertAlmostEqual(population.mean_fitness(), 6.0)
        self.assertEqual([i.fitness for i in population.elites(2)], [9, 6])


if __name__ == '__main__':
    unittest.main()
