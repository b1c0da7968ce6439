"""Command line that runs the worked example of each puzzle."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from puzzlebox.binary_watch import read_binary_watch
from puzzlebox.divide_array import divide_array
from puzzlebox.house_robber import rob
from puzzlebox.level_order import level_order_bottom
from puzzlebox.max_difference import maximum_difference
from puzzlebox.partition import partition_array
from puzzlebox.path_sum import path_sum
from puzzlebox.restore_ip import SolvingMethod, restore_ip_addresses
from puzzlebox.score import score_of_string
from puzzlebox.tree import build_tree
from puzzlebox.tree_string import tree_to_string


def _level_order() -> None:
    for level in level_order_bottom(build_tree([3, 9, 20, -1, -1, 15, 7])):
        print("".join(f"{value} " for value in level))


def _house_robber() -> None:
    for houses in ([1, 2, 3, 1], [2, 7, 9, 3, 1], [8, 4, 8, 9]):
        print(f"The Result is -> {rob(houses)}")


def _max_difference() -> None:
    values = [5, 4, 3, 2, 1]
    difference = maximum_difference(values)
    print(difference)


def _partition() -> None:
    cases = [([3, 6, 1, 2, 5], 2), ([1, 2, 3], 1), ([2, 2, 4, 5], 0)]
    for nums, k in cases:
        print(partition_array(nums, k), end="\n---------\n")


def _divide_array() -> None:
    cases = [
        ([1, 3, 4, 8, 7, 9, 3, 5, 1], 2),
        ([2, 4, 2, 2, 5, 2], 2),
        ([4, 2, 9, 8, 2, 12, 7, 12, 10, 5, 8, 5, 5, 7, 9, 2, 5, 11], 14),
    ]
    for values, k in cases:
        for triple in divide_array(values, k):
            print("".join(f"{value} " for value in triple))
        print("-----")


def _score() -> None:
    text = "zaz"
    score = score_of_string(text)
    print(score)


def _binary_watch() -> None:
    for turned_on in range(11):
        print("".join(f"{time} ||| " for time in read_binary_watch(turned_on)), end="")
        print("\n------------------------------")


def _path_sum() -> None:
    root = build_tree([10, 5, -3, 3, 2, -1, 11, 3, -2, -1, 1])
    print(path_sum(root, 8))


def _tree_string() -> None:
    for values in ([1, 2, 3, 4], [1, 2, 3, -1, 4]):
        print(tree_to_string(build_tree(values)))


def _restore_ip() -> None:
    for method in (SolvingMethod.ITERATIVELY, SolvingMethod.RECURSIVELY):
        print(f"SOLVING {method.name}...")
        for address in restore_ip_addresses("2251641168", method):
            print(address)


PUZZLES: dict[str, Callable[[], None]] = {
    "level-order": _level_order,
    "house-robber": _house_robber,
    "max-difference": _max_difference,
    "partition": _partition,
    "divide-array": _divide_array,
    "score": _score,
    "binary-watch": _binary_watch,
    "path-sum": _path_sum,
    "tree-string": _tree_string,
    "restore-ip": _restore_ip,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the examples of the named puzzles, or of all of them."""
    parser = argparse.ArgumentParser(
        prog="puzzlebox", description="Run the worked example of each puzzle."
    )
    parser.add_argument(
        "puzzles",
        nargs="*",
        metavar="PUZZLE",
        help="puzzles to run: " + ", ".join(PUZZLES),
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.puzzles if name not in PUZZLES]
    if unknown:
        parser.error(
            f"invalid choice: {unknown[0]!r} (choose from {', '.join(PUZZLES)})"
        )
    for name in args.puzzles or PUZZLES:
        PUZZLES[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())