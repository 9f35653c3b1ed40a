"""An alphabetical index of the words of a text, kept in a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator

_LOWER_TABLE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
SEPARATOR = " "
SENTENCE_END = "."
UNBALANCED = -2


def lowercase_ascii(text: str) -> str:
    """Lower-case the ASCII letters A-Z, leaving every other character alone."""
    return text.translate(_LOWER_TABLE)


def upper_char(char: str) -> str:
    """The upper-case form of an ASCII letter a-z; any other character unchanged."""
    if "a" <= char <= "z":
        return chr(ord(char) - 32)
    return char


@dataclass(frozen=True)
class Position:
    """Where a word occurs: line number, rank in the line and sentence number."""

    line: int
    order: int
    sentence: int


class PositionList:
    """Positions of one word, ordered by line then rank."""

    def __init__(self) -> None:
        self._positions: list[Position] = []

    def add(self, line: int, order: int, sentence: int) -> Position:
        """Insert a position; numbers start at 1 and a (line, order) pair is unique."""
        if line < 1 or order < 1 or sentence < 1:
            raise ValueError(
                "line, order and sentence numbers must all be at least 1"
            )
        index = next(
            (
                i
                for i, current in enumerate(self._positions)
                if not (current.line < line or current.order < order)
            ),
            len(self._positions),
        )
        if index < len(self._positions):
            current = self._positions[index]
            if current.line == line and current.order == order:
                raise ValueError(f"position (line {line}, order {order}) already exists")
        position = Position(line, order, sentence)
        self._positions.insert(index, position)
        return position

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)


@dataclass(eq=False)
class WordNode:
    """A tree node holding one word, its occurrence count and its positions."""

    word: str
    occurrences: int = 1
    positions: PositionList = field(default_factory=PositionList)
    left: WordNode | None = field(default=None, repr=False)
    right: WordNode | None = field(default=None, repr=False)


def find_max(node: WordNode | None) -> WordNode | None:
    """The node with the most occurrences in the subtree; children win ties."""
    if node is None:
        return None
    best_left = find_max(node.left)
    best_right = find_max(node.right)
    if best_left is not None and best_right is not None:
        if best_left.occurrences > best_right.occurrences:
            return node if node.occurrences > best_left.occurrences else best_left
        return node if node.occurrences > best_right.occurrences else best_right
    if best_left is not None:
        return node if node.occurrences > best_left.occurrences else best_left
    if best_right is not None:
        return node if node.occurrences > best_right.occurrences else best_right
    return node


def height(node: WordNode | None) -> int:
    """Height of the subtree, -1 when it is empty."""
    if node is None:
        return -1
    return max(height(node.left), height(node.right)) + 1


def balanced_height(node: WordNode | None) -> int:
    """Height of the subtree if it is height-balanced, -2 otherwise."""
    if node is None:
        return -1
    left = balanced_height(node.left)
    right = balanced_height(node.right)
    if left == UNBALANCED or right == UNBALANCED or abs(left - right) > 1:
        return UNBALANCED
    return max(left, right) + 1


@dataclass
class Index:
    """Words of a text with their positions, plus the text's sentences and lines."""

    root: WordNode | None = None
    distinct_words: int = 0
    total_words: int = 0
    sentences: list[list[str]] = field(default_factory=list)
    lines: list[list[str]] = field(default_factory=list)

    def find(self, word: str) -> WordNode | None:
        """The node for ``word`` (compared in lower case), or None."""
        word = lowercase_ascii(word)
        node = self.root
        while node is not None and node.word != word:
            node = node.left if node.word > word else node.right
        return node

    def insert_node(self, node: WordNode) -> None:
        """Attach a node for a word not yet in the tree."""
        if self.find(node.word) is not None:
            raise ValueError(f"the word {node.word!r} is already indexed")
        parent: WordNode | None = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if current.word > node.word else current.right
        if parent is None:
            self.root = node
        elif parent.word > node.word:
            parent.left = node
        else:
            parent.right = node

    def index_lines(self, lines: Iterable[str]) -> int:
        """Index lines of text; return how many words were read."""
        line_number = 1
        sentence_number = 1
        words_read = 0
        current_sentence: list[str] = []

        for raw in lines:
            if raw == "\n":
                continue
            text = lowercase_ascii(raw)
            if text.endswith("\n"):
                text = text[:-1]
            current_line: list[str] = []
            for order, token in enumerate(
                (t for t in text.split(SEPARATOR) if t), start=1
            ):
                ends_sentence = token.endswith(SENTENCE_END)
                word = token[:-1] if ends_sentence else token

                node = self.find(word)
                if node is None:
                    node = WordNode(word)
                    node.positions.add(line_number, order, sentence_number)
                    self.insert_node(node)
                    self.distinct_words += 1
                else:
                    node.occurrences += 1
                    node.positions.add(line_number, order, sentence_number)
                self.total_words += 1

                current_sentence.append(word)
                current_line.append(word)
                words_read += 1

                if ends_sentence:
                    self.sentences.append(current_sentence)
                    current_sentence = []
                    sentence_number += 1
            line_number += 1
            if current_line:
                self.lines.append(current_line)
        return words_read

    def index_file(self, path: str | PathLike[str]) -> int:
        """Index the text file at ``path``; return how many words were read."""
        with open(path, encoding="utf-8") as stream:
            return self.index_lines(stream)

    def __iter__(self) -> Iterator[WordNode]:
        """Nodes in alphabetical order of their words."""
        stack: list[WordNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def height(self) -> int:
        """Height of the word tree, -1 when empty."""
        return height(self.root)

    def is_balanced(self) -> bool:
        """True if the word tree is height-balanced."""
        return balanced_height(self.root) != UNBALANCED

    def most_frequent(self) -> WordNode | None:
        """The node of the word with the most occurrences, or None when empty."""
        return find_max(self.root)