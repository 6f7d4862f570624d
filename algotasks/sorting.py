"""Reading integer data files and a collection of comparison sorts."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import Any

_COUNT = re.compile(r"\+?[0-9]+")
_INT32 = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class DataFormatError(ValueError):
    """Raised when a data file does not have the expected layout."""


def _parse_i32(token: str) -> int:
    if not _INT32.fullmatch(token):
        raise DataFormatError(f"invalid digit found in string: {token!r}")
    value = int(token)
    if not _I32_MIN <= value <= _I32_MAX:
        raise DataFormatError(f"number too large to fit in target type: {token!r}")
    return value


def parse_numbers(text: str) -> list[int]:
    """Parse a count line followed by a line of that many integers."""
    lines = iter(text.splitlines())
    first = next(lines, None)
    if first is None:
        raise DataFormatError("文件为空")
    count_text = first.strip()
    if not _COUNT.fullmatch(count_text):
        raise DataFormatError(f"invalid count: {count_text!r}")
    expected = int(count_text)
    data_line = next(lines, None)
    if data_line is None:
        raise DataFormatError("缺少数据行")
    numbers = [_parse_i32(token) for token in data_line.split()]
    if len(numbers) != expected:
        raise DataFormatError(f"数据数量不匹配: 预期 {expected}, 实际 {len(numbers)}")
    return numbers


def read_numbers(path: str | os.PathLike[str]) -> list[int]:
    """Read and parse a data file."""
    with open(path, encoding="utf-8") as handle:
        return parse_numbers(handle.read())


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i
        while j > 0 and value < result[j - 1]:
            result[j] = result[j - 1]
            j -= 1
        result[j] = value
    return result


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences, taking from ``left`` on ties."""
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = len(result) // 2
    return merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def bottom_up_merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using iterative bottom-up merge sort."""
    result = list(items)
    length = len(result)
    width = 1
    while width < length:
        for start in range(0, length - width, 2 * width):
            mid = start + width
            end = min(start + 2 * width, length)
            result[start:end] = merge(result[start:mid], result[mid:end])
        width *= 2
    return result


def _lomuto_partition(items: list[Any], lo: int, hi: int, rng: random.Random) -> int:
    pivot_index = rng.randrange(lo, hi)
    last = hi - 1
    items[pivot_index], items[last] = items[last], items[pivot_index]
    pivot = items[last]
    store = lo
    for j in range(lo, last):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[last] = items[last], items[store]
    return store


def random_quicksort(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a sorted copy using quicksort with a random pivot."""
    rng = random.Random() if rng is None else rng
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        p = _lomuto_partition(result, lo, hi, rng)
        pending.append((lo, p))
        pending.append((p + 1, hi))
    return result


def quick_sort_3way(items: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a sorted copy using three-way (Dijkstra) partitioning quicksort."""
    rng = random.Random() if rng is None else rng
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        pivot_index = rng.randrange(lo, hi)
        result[lo], result[pivot_index] = result[pivot_index], result[lo]
        lt, gt, i = lo, hi, lo + 1
        while i < gt:
            if result[i] < result[lt]:
                result[lt], result[i] = result[i], result[lt]
                lt += 1
                i += 1
            elif result[i] > result[lt]:
                gt -= 1
                result[i], result[gt] = result[gt], result[i]
            else:
                i += 1
        pending.append((lo, lt))
        pending.append((gt, hi))
    return result


_ALGORITHMS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "insertion": insertion_sort,
    "merge": merge_sort,
    "bottom-up": bottom_up_merge_sort,
    "random-quick": random_quicksort,
    "quick3way": quick_sort_3way,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers in a data file and print them."""
    parser = argparse.ArgumentParser(description="Sort integers read from a data file.")
    parser.add_argument("path", help="data file: a count line, then a line of integers")
    parser.add_argument(
        "-a", "--algorithm", choices=sorted(_ALGORITHMS), default="insertion",
        help="sorting algorithm to use (default: insertion)",
    )
    parser.add_argument("-t", "--time", action="store_true", help="report elapsed time")
    args = parser.parse_args(argv)

    try:
        numbers = read_numbers(args.path)
    except (OSError, DataFormatError) as exc:
        print(f"读取文件出错: {exc}", file=sys.stderr)
        return 1

    started = time.perf_counter()
    ordered = _ALGORITHMS[args.algorithm](numbers)
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    print(ordered)
    if args.time:
        print(f"耗时: {elapsed_ms} 毫秒")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())