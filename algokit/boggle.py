"""Word search on a letter board using a trie and 8-way depth-first search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_DIRECTIONS = [(0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1)]


class TrieNode:
    """One character position in the trie."""

    def __init__(self, char: str) -> None:
        self.char = char
        self.children: dict[str, TrieNode] = {}
        self.word = ""
        self.is_terminal = False


class Trie:
    """Prefix tree of words; terminal nodes store the full word."""

    def __init__(self) -> None:
        self.root = TrieNode("")

    def add_word(self, word: str) -> None:
        node = self.root
        for char in word:
            node = node.children.setdefault(char, TrieNode(char))
        node.is_terminal = True
        node.word = word


def find_words(board: Sequence[Sequence[str]], words: Iterable[str]) -> set[str]:
    """Return every word that can be traced on the board.

    Consecutive letters must be adjacent horizontally, vertically or
    diagonally, and no cell may be used twice in one word.
    """
    trie = Trie()
    for word in words:
        trie.add_word(word)

    rows = len(board)
    found: set[str] = set()
    visited: set[tuple[int, int]] = set()

    def search(node: TrieNode, i: int, j: int) -> None:
        child = node.children.get(board[i][j])
        if child is None:
            return
        visited.add((i, j))
        if child.is_terminal:
            found.add(child.word)
        for di, dj in _DIRECTIONS:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < rows
                and 0 <= nj < len(board[ni])
                and (ni, nj) not in visited
            ):
                search(child, ni, nj)
        visited.discard((i, j))

    for i, row in enumerate(board):
        for j in range(len(row)):
            search(trie.root, i, j)
    return found