#!/usr/bin/env python3
"""
Insertion order benchmark for OrderedTreeLib.

The tree never rebalances, so its shape (and the cost of every later
operation) depends on the order values arrive in. This benchmark
measures that:
1. Build time for shuffled, sorted and reverse-sorted input
2. Resulting height
3. Cost of a full in-order traversal and of membership lookups
"""

import gc
import random
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import contains, from_iterable, get_tree_stats, traverse


class InsertionOrderBenchmark:
    """Compare tree builds across insertion orders."""

    def __init__(self, size: int, iterations: int = 3, seed: int = 1234):
        self.size = size
        self.iterations = iterations
        values = list(range(size))
        shuffled = values[:]
        random.Random(seed).shuffle(shuffled)
        self.inputs: Dict[str, List[int]] = {
            'shuffled': shuffled,
            'sorted': values,
            'reverse sorted': values[::-1],
        }

    def _median_time(self, func: Callable[[], object]) -> float:
        times = []
        for _ in range(self.iterations):
            gc.collect()
            start = time.perf_counter()
            func()
            times.append(time.perf_counter() - start)
        return statistics.median(times)

    def run(self) -> Dict[str, Dict[str, float]]:
        results = {}
        probes = random.Random(99).sample(range(self.size), min(self.size, 200))

        for name, items in self.inputs.items():
            build_time = self._median_time(lambda: from_iterable(items))
            tree = from_iterable(items)
            walk_time = self._median_time(lambda: sum(1 for _ in traverse(tree)))
            lookup_time = self._median_time(lambda: [contains(tree, p) for p in probes])
            stats = get_tree_stats(tree)

            results[name] = {
                'build': build_time,
                'walk': walk_time,
                'lookups': lookup_time,
                'height': stats['height'],
            }
        return results


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 2000

    print("=" * 72)
    print(f"INSERTION ORDER BENCHMARK ({size} values)")
    print("=" * 72)

    results = InsertionOrderBenchmark(size).run()

    print(f"\n{'Input':<16} {'Height':>8} {'Build (s)':>12} {'Walk (s)':>12} {'200 lookups (s)':>16}")
    print("-" * 72)
    for name, r in results.items():
        print(f"{name:<16} {r['height']:>8} {r['build']:>12.4f} {r['walk']:>12.4f} {r['lookups']:>16.4f}")

    print("\n" + "=" * 72)
    print("CONCLUSIONS")
    print("=" * 72)
    print("""
- Shuffled input gives a height near 2-3 x log2(n); builds and lookups
  stay fast.
- Sorted or reverse-sorted input gives height n: every insert copies
  the whole spine, so the build is quadratic and lookups are linear.
- A full traversal is linear in every case; only the shape changes.

Shuffle input before building when its order is not meaningful.
""")


if __name__ == "__main__":
    main()
