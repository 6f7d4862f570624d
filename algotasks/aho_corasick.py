"""Aho-Corasick multi-pattern search reporting first match positions."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0c")


@dataclass
class _Node:
    children: dict[str, int] = field(default_factory=dict)
    fail: int = 0
    outputs: list[int] = field(default_factory=list)


class ACAutomaton:
    """A trie of patterns with failure links for linear-time matching."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = [_Node()]

    def __len__(self) -> int:
        return len(self._nodes)

    def insert(self, pattern: str, index: int) -> None:
        """Add ``pattern`` to the trie, reported as ``index`` when matched."""
        current = 0
        for char in pattern:
            children = self._nodes[current].children
            if char not in children:
                self._nodes.append(_Node())
                children[char] = len(self._nodes) - 1
            current = children[char]
        self._nodes[current].outputs.append(index)

    def build_failures(self) -> None:
        """Compute failure links and merge outputs along them."""
        nodes = self._nodes
        queue: deque[int] = deque()
        for child in nodes[0].children.values():
            nodes[child].fail = 0
            queue.append(child)

        while queue:
            current = queue.popleft()
            for char, child in list(nodes[current].children.items()):
                fail = nodes[current].fail
                while fail != 0 and char not in nodes[fail].children:
                    fail = nodes[fail].fail
                next_fail = nodes[fail].children.get(char, 0)
                nodes[child].fail = next_fail
                nodes[child].outputs.extend(nodes[next_fail].outputs)
                queue.append(child)

    def _step(self, state: int, char: str) -> int:
        nodes = self._nodes
        while state != 0 and char not in nodes[state].children:
            state = nodes[state].fail
        return nodes[state].children.get(char, state)

    def search_char(self, text: str, patterns: Sequence[str]) -> dict[int, int]:
        """Map each matched pattern index to the character offset of its first match."""
        result: dict[int, int] = {}
        state = 0
        for i, char in enumerate(text):
            state = self._step(state, char)
            for index in self._nodes[state].outputs:
                result.setdefault(index, i + 1 - len(patterns[index]))
        return result

    def search_character(self, text: str, patterns: Sequence[str]) -> dict[int, int]:
        """Map each matched pattern index to the 1-based word number where it starts."""
        word_numbers: list[int] = []
        word_count = 0
        in_word = False
        for char in text:
            if char in _ASCII_WHITESPACE:
                in_word = False
            elif not in_word:
                word_count += 1
                in_word = True
            word_numbers.append(word_count)

        result: dict[int, int] = {}
        state = 0
        for char, word_number in zip(text, word_numbers):
            state = self._step(state, char)
            for index in self._nodes[state].outputs:
                pattern_words = len(patterns[index].split())
                if word_number + 1 >= pattern_words:
                    result.setdefault(index, word_number + 1 - pattern_words)
        return result


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def main(argv: Sequence[str] | None = None) -> int:
    """Report the word position of every query line found in a corpus file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: aho_corasick <corpus_file> <query_file>", file=sys.stderr)
        return 1
    corpus_path, query_path = args
    try:
        with open(corpus_path, encoding="utf-8") as handle:
            corpus = handle.read()
    except OSError as exc:
        print(f"Failed to read corpus file: {exc}", file=sys.stderr)
        return 1
    try:
        with open(query_path, encoding="utf-8") as handle:
            patterns = _lines(handle.read())
    except OSError as exc:
        print(f"Failed to read query file: {exc}", file=sys.stderr)
        return 1

    automaton = ACAutomaton()
    for index, pattern in enumerate(patterns):
        automaton.insert(pattern, index)
    automaton.build_failures()

    positions = automaton.search_character(corpus, patterns)
    for index, pattern in enumerate(patterns):
        if index in positions:
            print(f"{positions[index]} {pattern}")
        else:
            print(f"-- {pattern}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())