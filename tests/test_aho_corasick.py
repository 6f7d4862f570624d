import pytest

from algotasks.aho_corasick import ACAutomaton, main


def _build(patterns):
    automaton = ACAutomaton()
    for index, pattern in enumerate(patterns):
        automaton.insert(pattern, index)
    automaton.build_failures()
    return automaton


@pytest.mark.parametrize(
    "patterns, text",
    [
        (["he", "she", "his", "hers"], "ushers"),
        (["a", "ab", "bab", "bc", "bca", "c", "caa"], "abccab"),
        (["abc", "bcd", "zzz"], "xxabcdyyabc"),
    ],
)
def test_search_char_reports_first_occurrence(patterns, text):
    automaton = _build(patterns)
    found = automaton.search_char(text, patterns)
    for index, pattern in enumerate(patterns):
        if pattern in text:
            assert found[index] == text.find(pattern)
        else:
            assert index not in found


def test_search_char_with_overlapping_suffix_patterns():
    patterns = ["she", "he"]
    found = _build(patterns).search_char("she", patterns)
    assert set(found) == {0, 1}
    assert "she"[found[1]:found[1] + 2] == "he"


def test_search_char_no_match_gives_empty_result():
    patterns = ["xyz"]
    assert _build(patterns).search_char("abcabc", patterns) == {}


def test_insert_shares_prefixes():
    automaton = ACAutomaton()
    automaton.insert("abc", 0)
    size_after_first = len(automaton)
    automaton.insert("abd", 1)
    assert len(automaton) == size_after_first + 1


def test_search_character_multi_word_pattern():
    patterns = ["brown fox"]
    found = _build(patterns).search_character("the quick brown fox", patterns)
    assert found == {0: 3}


def test_search_character_first_word():
    patterns = ["alpha", "gamma"]
    found = _build(patterns).search_character("alpha beta gamma", patterns)
    assert found == {0: 1, 1: 3}


def test_search_character_missing_pattern():
    patterns = ["delta"]
    assert _build(patterns).search_character("alpha beta gamma", patterns) == {}


def test_main_reports_positions(tmp_path, capsys):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("alpha beta\ngamma delta\n", encoding="utf-8")
    queries = tmp_path / "queries.txt"
    queries.write_text("beta\nmissing\nalpha\n", encoding="utf-8")
    assert main([str(corpus), str(queries)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["2 beta", "-- missing", "1 alpha"]


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_corpus(tmp_path, capsys):
    queries = tmp_path / "queries.txt"
    queries.write_text("x\n", encoding="utf-8")
    assert main([str(tmp_path / "absent.txt"), str(queries)]) == 1
    assert "corpus" in capsys.readouterr().err