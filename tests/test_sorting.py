import random
from dataclasses import dataclass, field

import pytest

from algotasks.sorting import (
    DataFormatError,
    bottom_up_merge_sort,
    insertion_sort,
    main,
    merge,
    merge_sort,
    parse_numbers,
    quick_sort_3way,
    random_quicksort,
    read_numbers,
)


@dataclass(order=True)
class Tagged:
    key: int
    tag: int = field(compare=False)


def test_parse_numbers_basic():
    assert parse_numbers("3\n3 -1 2\n") == [3, -1, 2]


def test_parse_numbers_allows_padding_and_crlf():
    assert parse_numbers("  2 \r\n  7   8  \r\n") == [7, 8]


def test_parse_numbers_zero_count_empty_line():
    assert parse_numbers("0\n\n") == []


@pytest.mark.parametrize(
    "text",
    ["", "abc\n1", "-1\n", "2", "2\n1", "1\n1 2", "1\nx", "1\n2147483648", "1\n1.5"],
)
def test_parse_numbers_rejects_bad_input(text):
    with pytest.raises(DataFormatError):
        parse_numbers(text)


def test_parse_numbers_mismatch_message():
    with pytest.raises(DataFormatError, match="预期 3, 实际 2"):
        parse_numbers("3\n1 2\n")


def test_parse_numbers_i32_bounds():
    assert parse_numbers("2\n-2147483648 2147483647") == [-2147483648, 2147483647]


def test_read_numbers_from_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("4\n9 8 7 6\n", encoding="utf-8")
    assert read_numbers(path) == [9, 8, 7, 6]


def test_read_numbers_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_numbers(tmp_path / "absent.txt")


def test_merge_interleaves():
    assert merge([1, 3, 5], [2, 4, 6]) == sorted([1, 3, 5, 2, 4, 6])
    assert merge([], [1, 2]) == [1, 2]
    assert merge([1, 2], []) == [1, 2]


def test_merge_prefers_left_on_ties():
    left = [Tagged(1, 0)]
    right = [Tagged(1, 1)]
    assert [t.tag for t in merge(left, right)] == [0, 1]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sorts_match_builtin(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 200))]
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert bottom_up_merge_sort(data) == expected
    assert random_quicksort(data, random.Random(5)) == expected
    assert quick_sort_3way(data, random.Random(5)) == expected


@pytest.mark.parametrize("data", [[], [1], [2, 1], [5, 5, 5, 5], list(range(30, 0, -1))])
def test_sorts_edge_cases(data):
    expected = sorted(data)
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert bottom_up_merge_sort(data) == expected
    assert random_quicksort(data, random.Random(5)) == expected
    assert quick_sort_3way(data, random.Random(5)) == expected


def test_sorts_do_not_mutate_input():
    data = [3, 1, 2]
    snapshot = list(data)
    assert insertion_sort(data) == [1, 2, 3]
    assert merge_sort(data) == [1, 2, 3]
    assert bottom_up_merge_sort(data) == [1, 2, 3]
    assert random_quicksort(data, random.Random(5)) == [1, 2, 3]
    assert quick_sort_3way(data, random.Random(5)) == [1, 2, 3]
    assert data == snapshot


@pytest.mark.parametrize("sort", [insertion_sort, merge_sort, bottom_up_merge_sort])
def test_stable_sorts_keep_order_of_equals(sort):
    rng = random.Random(11)
    data = [Tagged(rng.randint(0, 5), i) for i in range(60)]
    result = sort(data)
    assert [t.key for t in result] == sorted(t.key for t in data)
    for a, b in zip(result, result[1:]):
        if a.key == b.key:
            assert a.tag < b.tag


def test_quicksorts_handle_many_duplicates():
    data = [7] * 3000 + [1] * 2000
    assert random_quicksort(data, random.Random(0)) == sorted(data)
    assert quick_sort_3way(data, random.Random(0)) == sorted(data)


def test_main_prints_sorted_list(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("3\n3 1 2\n", encoding="utf-8")
    assert main([str(path), "--algorithm", "quick3way"]) == 0
    assert capsys.readouterr().out.splitlines() == ["[1, 2, 3]"]


def test_main_reports_time(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("2\n2 1\n", encoding="utf-8")
    assert main([str(path), "-a", "merge", "--time"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[1, 2]"
    assert lines[1].startswith("耗时: ") and lines[1].endswith(" 毫秒")


def test_main_reports_read_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "读取文件出错" in capsys.readouterr().err


def test_main_reports_format_error(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "文件为空" in capsys.readouterr().err