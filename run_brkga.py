import argparse
import sys
import time

import matplotlib.pyplot as plt

from brkga import BRKGA, BRKGAConfig
from problems import KnapsackProblem


def plot_results(history: dict, problem_name: str, save_path: str = None):
    """Plot BRKGA evolution results"""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    generations = range(1, len(history['mean']) + 1)

    # plot mean fitness
    ax1.plot(generations, history['mean'], label='Mean Fitness', alpha=0.7)
    ax1.set_xlabel('Generation')
    ax1.set_ylabel('Fitness')
    ax1.set_title(f'{problem_name} - Mean Fitness')
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # plot max fitness
    ax2.plot(generations, history['max'], label='Best Fitness', color='green', alpha=0.7)
    ax2.set_xlabel('Generation')
    ax2.set_ylabel('Fitness')
    ax2.set_title(f'{problem_name} - Best Fitness')
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        print(f"Plot saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def build_config(args) -> BRKGAConfig:
    return BRKGAConfig(
        population_size=args.population_size,
        elite_fraction=args.elite_fraction,
        mutant_fraction=args.mutant_fraction,
        elite_inheritance=args.rhoe,
        generations=args.generations,
        mutation_rate=args.mutation_rate,
        seed=args.seed
    )


def run_brkga(args) -> int:
    """Run BRKGA with the specified configuration, returns the best fitness"""
    start = time.perf_counter()

    if args.instance:
        problem = KnapsackProblem.from_file(args.instance)
    else:
        problem = KnapsackProblem.random(args.num_items, args.capacity, seed=args.seed)

    config = build_config(args)
    config.validate()

    if args.verbose:
        print(f"Loaded Problem: {problem.problem_name()}")
        print(f"BRKGA initialized (P={config.population_size}, elite={config.elite_count}, "
              f"mutants={config.mutant_count}, rhoe={config.elite_inheritance})")

    ga = BRKGA(problem, config)
    if args.load_population:
        ga.load_population(args.load_population)
    else:
        ga.init_population()

    best = ga.start(
        generations=config.generations,
        save_interval=args.save_interval,
        save_filename=args.save_filename,
        verbose=args.verbose,
        show_population=args.show_population
    )

    elapsed = time.perf_counter() - start
    label = args.instance or "random"
    print(f"{label} {best.fitness} {elapsed:.3f}")

    if args.show_selection:
        selection = ga.best_solution()["selection"]
        print(f"Selected items: {selection}")
        print(f"Total weight: {problem.total_weight(selection)} / {problem.capacity}")

    if args.plot:
        plot_results(ga.history, problem.problem_name(), save_path="brkga_results.png")

    return best.fitness


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Solve a 0/1 knapsack instance with a biased random-key genetic algorithm",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # problem configuration
    parser.add_argument(
        'instance',
        nargs='?',
        default=None,
        help='Instance file ("N C" followed by N lines "id weight value"); '
             'a random instance is generated when omitted'
    )
    parser.add_argument(
        '--num-items',
        type=int,
        default=50,
        help='Number of items of the random instance'
    )
    parser.add_argument(
        '--capacity',
        type=int,
        default=200,
        help='Capacity of the random instance'
    )

    # BRKGA parameters
    parser.add_argument(
        '--population-size',
        type=int,
        default=100,
        help='Population size (P)'
    )
    parser.add_argument(
        '--generations',
        type=int,
        default=200,
        help='Number of generations (G)'
    )
    parser.add_argument(
        '--elite-fraction',
        type=float,
        default=0.3,
        help='Fraction of elite individuals (pe)'
    )
    parser.add_argument(
        '--mutant-fraction',
        type=float,
        default=0.2,
        help='Fraction of mutant individuals (pm)'
    )
    parser.add_argument(
        '--rhoe',
        type=float,
        default=0.7,
        help='Probability of inheriting a key from the elite parent'
    )
    parser.add_argument(
        '--mutation-rate',
        type=float,
        default=0.05,
        help='Per-gene key mutation probability of crossover offspring'
    )

    # checkpoints
    parser.add_argument(
        '--save-interval',
        type=int,
        default=None,
        help='Save the population every N generations'
    )
    parser.add_argument(
        '--save-filename',
        type=str,
        default='population.txt',
        help='Population checkpoint file'
    )
    parser.add_argument(
        '--load-population',
        type=str,
        default=None,
        help='Start from a saved population instead of a random one'
    )

    # misc
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed (OS entropy when omitted)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print progress while evolving'
    )
    parser.add_argument(
        '--show-population',
        action='store_true',
        help='Print the ten best fitness values of every generation'
    )
    parser.add_argument(
        '--show-selection',
        action='store_true',
        help='Print the items chosen by the best individual'
    )
    parser.add_argument(
        '--plot',
        action='store_true',
        help='Generate and save plots'
    )

    args = parser.parse_args(argv)

    try:
        run_brkga(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
