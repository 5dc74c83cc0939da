from problems.knapsack import InstanceLoadError, Item, KnapsackProblem, decode, load_instance

__all__ = ['InstanceLoadError', 'Item', 'KnapsackProblem', 'decode', 'load_instance']
