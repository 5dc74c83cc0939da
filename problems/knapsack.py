import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence, Tuple, Union

from problems.base_problem import BaseProblem


class InstanceLoadError(ValueError):
    """Raised when a knapsack instance file is missing or malformed"""


@dataclass(frozen=True)
class Item:
    weight: int
    value: int
    density: float = field(init=False)

    def __post_init__(self):
        if self.weight <= 0:
            raise ValueError(f"Item weight must be positive, got {self.weight}")
        if self.value <= 0:
            raise ValueError(f"Item value must be positive, got {self.value}")
        object.__setattr__(self, "density", self.value / self.weight)


def decode(chromosome: Sequence, items: Sequence[Item], capacity: int) -> Tuple[FrozenSet[int], int]:
    """
    Greedy decoder: walks the genes in their stored order (descending key) and
    packs every item that still fits. Skipped items are never reconsidered.

    Args:
        chromosome: Sequence of (key, index) genes, sorted by descending key
        items: Item catalog
        capacity: Knapsack capacity

    Returns:
        Selected item indices and their total value
    """
    selection = []
    total_weight = 0
    total_value = 0

    for _, idx in chromosome:
        item = items[idx]
        if total_weight + item.weight <= capacity:
            selection.append(idx)
            total_weight += item.weight
            total_value += item.value

    return frozenset(selection), total_value


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InstanceLoadError(f"Expected an integer for {what}, got {token!r}") from None


def load_instance(path: Union[str, Path]) -> Tuple[List[Item], int]:
    """
    Reads an instance file.

    The format is whitespace delimited: the item count N and the capacity C,
    followed by N records "id weight value". The id field is ignored.

    Returns:
        The item catalog and the capacity
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            tokens = f.read().split()
    except OSError as e:
        raise InstanceLoadError(f"Cannot open instance file {path}: {e}") from e

    if len(tokens) < 2:
        raise InstanceLoadError(f"{path}: missing item count and capacity header")

    num_items = _parse_int(tokens[0], "the item count")
    capacity = _parse_int(tokens[1], "the capacity")
    if num_items <= 0:
        raise InstanceLoadError(f"{path}: item count must be positive, got {num_items}")
    if capacity < 0:
        raise InstanceLoadError(f"{path}: capacity must be non-negative, got {capacity}")

    records = tokens[2:]
    if len(records) < 3 * num_items:
        found = len(records) // 3
        raise InstanceLoadError(
            f"{path}: expected {num_items} items, found {found} complete record(s)"
        )

    items = []
    for i in range(num_items):
        _, weight, value = records[3 * i:3 * i + 3]
        weight = _parse_int(weight, f"the weight of item {i}")
        value = _parse_int(value, f"the value of item {i}")
        try:
            items.append(Item(weight, value))
        except ValueError as e:
            raise InstanceLoadError(f"{path}: item {i}: {e}") from e

    return items, capacity


class KnapsackProblem(BaseProblem):
    def __init__(self, items: Sequence[Item], capacity: int, name: Optional[str] = None):
        """
        0/1 knapsack problem initialization.

        Args:
            items: Item catalog, indexed by gene index
            capacity: Weight capacity of knapsack
            name: Label used when reporting (usually the instance file name)
        """
        if not items:
            raise ValueError("Knapsack instance must contain at least one item")
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.items = tuple(items)
        self.capacity = capacity
        self.name = name
        self.__densities = tuple(item.density for item in self.items)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "KnapsackProblem":
        items, capacity = load_instance(path)
        return cls(items, capacity, name=str(path))

    @classmethod
    def random(
        cls,
        num_items: int = 20,
        capacity: int = 100,
        seed: Optional[int] = None
    ) -> "KnapsackProblem":
        """Generates a random instance with weights in [1, 30] and values in [1, 100]"""
        rng = random.Random(seed)
        items = [Item(rng.randint(1, 30), rng.randint(1, 100)) for _ in range(num_items)]
        return cls(items, capacity)

    @property
    def num_genes(self) -> int:
        return len(self.items)

    def key_scales(self) -> Tuple[float, ...]:
        return self.__densities

    def decode(self, chromosome: Sequence) -> Tuple[FrozenSet[int], int]:
        return decode(chromosome, self.items, self.capacity)

    def total_weight(self, selection) -> int:
        return sum(self.items[idx].weight for idx in selection)

    def problem_name(self) -> str:
        label = f"{self.name}, " if self.name else ""
        return f"Knapsack ({label}items={self.num_genes}, capacity={self.capacity})"
