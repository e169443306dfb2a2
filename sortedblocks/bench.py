"""Timing runs for the sorted containers, with a small command-line front end."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from typing import Any, NamedTuple

from sortedcontainers import SortedDict

from sortedblocks.blocklist import BlockList
from sortedblocks.bsearch import CapacityError, SortedArray, cmp_2int64

_MODULUS = 1 << 31
_VALUE_LOW = 100
_VALUE_HIGH = 1_000_000_000
_SORTED_ARRAY_LIMIT = 5_002_400
_BLOCK_ELEMENT_LIMIT = 8000
_PROBE_COUNT = 10


def _now_us() -> int:
    return time.perf_counter_ns() // 1000


def _per_op(total_us: int, ops: int) -> float:
    if ops == 0:
        return float("nan") if total_us == 0 else float("inf")
    return total_us / ops


class Lcg:
    """Linear congruential generator modulo 2**31.

    With no seed, the current time in microseconds is used.
    """

    def __init__(self, seed: int | None = None, a: int = 1703515245, c: int = 563871) -> None:
        self.state = time.time_ns() // 1000 if seed is None else seed
        self.a = a
        self.c = c

    def next(self, low: int, high: int) -> int:
        """Advance the generator and return a value in ``[low, high]``.

        When ``high <= low`` the state still advances and ``low`` is returned.
        """
        self.state = (self.a * self.state + self.c) % _MODULUS
        if high <= low:
            return low
        return self.state % (high - low + 1) + low


class Element(NamedTuple):
    """A record ordered by ``uid`` first, then ``source``."""

    uid: int
    source: int


def make_elements(count: int, rng: Lcg) -> list[Element]:
    """Draw ``count`` random elements; each draws its source, then its uid."""
    elements = []
    for _ in range(count):
        source = rng.next(_VALUE_LOW, _VALUE_HIGH)
        uid = rng.next(_VALUE_LOW, _VALUE_HIGH)
        elements.append(Element(uid, source))
    return elements


def benchmark_sorted_array(
    elements: Sequence[Element], extra: Element, probes: Sequence[Element]
) -> dict[str, Any]:
    """Time puts and lookups on a bounded ``SortedArray``."""
    array = SortedArray(_SORTED_ARRAY_LIMIT, cmp_2int64)

    start = _now_us()
    for element in elements:
        array.put(element)
    put_us = _now_us() - start
    count = len(array)

    start = _now_us()
    try:
        array.put(extra)
    except CapacityError:
        pass
    put_one_us = _now_us() - start

    start = _now_us()
    array.get(extra)
    get_one_us = _now_us() - start

    start = _now_us()
    errors = sum(1 for element in elements if array.get_pos(element) < 0)
    get_us = _now_us() - start

    return {
        "count": count,
        "count_after_extra": len(array),
        "put_us": put_us,
        "put_one_us": put_one_us,
        "get_one_us": get_one_us,
        "get_us": get_us,
        "errors": errors,
        "probes": [(probe.uid, array.get_pos(probe)) for probe in probes],
    }


def benchmark_block_list(
    elements: Sequence[Element], extra: Element, probes: Sequence[Element]
) -> dict[str, Any]:
    """Time puts, lookups and removals on a ``BlockList``."""
    blocks = BlockList(_BLOCK_ELEMENT_LIMIT, cmp_2int64)

    start = _now_us()
    for element in elements:
        blocks.put(element)
    put_us = _now_us() - start
    count = len(blocks)

    start = _now_us()
    blocks.put(extra)
    put_one_us = _now_us() - start

    start = _now_us()
    blocks.get_pos(extra)
    get_one_us = _now_us() - start

    start = _now_us()
    errors = sum(1 for element in elements if blocks.get_pos(element) < 0)
    get_us = _now_us() - start

    count_after_extra = len(blocks)
    probe_positions = [(probe.uid, blocks.get_pos(probe)) for probe in probes]

    start = _now_us()
    del_errors = 0
    for element in elements:
        try:
            blocks.remove(element)
        except KeyError:
            del_errors += 1
    del_us = _now_us() - start

    return {
        "count": count,
        "count_after_extra": count_after_extra,
        "put_us": put_us,
        "put_one_us": put_one_us,
        "get_one_us": get_one_us,
        "get_us": get_us,
        "errors": errors,
        "probes": probe_positions,
        "del_us": del_us,
        "del_errors": del_errors,
        "count_after_delete": len(blocks),
    }


def benchmark_map(elements: Sequence[Element], extra: Element) -> dict[str, Any]:
    """Time a sorted mapping keyed by ``(source, uid)``, then locate ``extra``."""
    mapping: SortedDict = SortedDict(lambda element: (element.source, element.uid))

    start = _now_us()
    for index, element in enumerate(elements):
        mapping[element] = index
    put_us = _now_us() - start
    count = len(mapping)

    start = _now_us()
    mapping[extra] = 1
    put_one_us = _now_us() - start

    start = _now_us()
    pos = mapping.index(extra)
    get_pos_us = _now_us() - start

    return {
        "count": count,
        "put_us": put_us,
        "put_one_us": put_one_us,
        "get_pos_us": get_pos_us,
        "pos": pos,
    }


def _print_common(report: dict[str, Any], ops_label: str) -> None:
    count = report["count"]
    print(
        f"put time cost: {report['put_us'] // 1000}ms, count={count}. "
        f"{_per_op(report['put_us'], count):g}us/op"
    )
    print(f"put one time cost: {report['put_one_us']}us, count={report['count_after_extra']}")
    print(f"get one time cost: {report['get_one_us']}us, count={report['count_after_extra']}")
    print(
        f"get time cost: {report['get_us'] // 1000}ms, "
        f"{_per_op(report['get_us'], report['count_after_extra']):g}us/op{ops_label}"
        f"error={report['errors']}"
    )
    print("get test: " + "".join(f"({uid}){pos} " for uid, pos in report["probes"]))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sortedblocks-bench", description="Time the sorted containers.")
    parser.add_argument("count", nargs="?", type=int, default=None, help="number of elements to insert")
    parser.add_argument("reserved", nargs="?", default=None, help="ignored")
    parser.add_argument(
        "sorted_array", nargs="?", type=int, default=1, help="1 to also time the bounded sorted array"
    )
    parser.add_argument("--map", action="store_true", help="time the sorted mapping instead")
    parser.add_argument("--seed", type=int, default=None, help="generator seed (default: current time)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the timings and print a report."""
    args = _parse_args(argv)

    if args.map:
        count = 1_000_000 if args.count is None else args.count
        rng = Lcg(args.seed, a=1103515245, c=12345)
        elements = make_elements(max(count, 0), rng)
        extra = make_elements(1, rng)[0]
        print("start")
        report = benchmark_map(elements, extra)
        print(
            f"put time cost: {report['put_us'] // 1000}ms, count={report['count']}. "
            f"{_per_op(report['put_us'], report['count']):g}us/op"
        )
        print(f"put one cost: {report['put_one_us']}us")
        print(f"get pos cost: {report['get_pos_us']}us, pos={report['pos']}")
        return 0

    count = 100_000 if args.count is None else args.count
    count = max(count, 0)
    rng = Lcg(args.seed)
    pool = make_elements(max(count, _VALUE_LOW + 1), rng)
    elements = pool[:count]
    probes = [pool[rng.next(_VALUE_LOW, count - 1)] for _ in range(_PROBE_COUNT)]
    extra = make_elements(1, rng)[0]

    print("start")
    if args.sorted_array == 1:
        _print_common(benchmark_sorted_array(elements, extra, probes), ", ")

    report = benchmark_block_list(elements, extra, probes)
    _print_common(report, ". ")
    print(
        f"del time cost: {report['del_us'] // 1000}ms, count={report['count_after_delete']}. "
        f"{_per_op(report['del_us'], count):g}us/op, error={report['del_errors']}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())