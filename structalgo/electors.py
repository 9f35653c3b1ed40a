"""Electors kept in a name-ordered list, with splitting, sorting and merging."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable, Iterator

LEFT_CHOICES = frozenset({1, 3})
RIGHT_CHOICES = frozenset({2, 4})
BLANK_CHOICE = 5

EMPTY_MESSAGE = "\nLa liste est vide !\n"
LIST_HEADER = "\n--------- Voici la liste des electeurs ---------\n"
LIST_FOOTER = "\n------------------------------------------------\n\n"


@dataclass
class Elector:
    """One voter: a name, an identity card number and a vote."""

    name: str
    cin: int
    choice: int

    @property
    def is_left(self) -> bool:
        """True for a vote for a left-wing candidate (1 or 3)."""
        return self.choice in LEFT_CHOICES

    @property
    def is_right(self) -> bool:
        """True for a vote for a right-wing candidate (2 or 4)."""
        return self.choice in RIGHT_CHOICES

    def __str__(self) -> str:
        return f"\nNom : {self.name}\nNumero electeur : {self.cin}\nVote : {self.choice}\n"


class ElectorList:
    """A sequence of electors; ``add`` keeps them in alphabetical order of name."""

    def __init__(self, electors: Iterable[Elector] = ()) -> None:
        self._electors: list[Elector] = list(electors)

    def add(self, name: str, cin: int, choice: int) -> Elector:
        """Insert a new elector before the first one whose name is not smaller."""
        elector = Elector(name, cin, choice)
        position = next(
            (
                index
                for index, current in enumerate(self._electors)
                if not name > current.name
            ),
            len(self._electors),
        )
        self._electors.insert(position, elector)
        return elector

    def __len__(self) -> int:
        return len(self._electors)

    def __iter__(self) -> Iterator[Elector]:
        return iter(self._electors)

    def find(self, cin: int) -> Elector | None:
        """The first elector with this number, or None."""
        return next((elector for elector in self._electors if elector.cin == cin), None)

    def remove(self, cin: int) -> Elector:
        """Remove and return the first elector with this number."""
        elector = self.find(cin)
        if elector is None:
            raise KeyError(cin)
        self._electors.remove(elector)
        return elector

    def split(self) -> tuple[ElectorList, ElectorList, ElectorList]:
        """Copies of the electors split into (left, blank, right) lists."""
        left, blank, right = ElectorList(), ElectorList(), ElectorList()
        for elector in self._electors:
            if elector.is_left:
                target = left
            elif elector.is_right:
                target = right
            else:
                target = blank
            target.add(elector.name, elector.cin, elector.choice)
        return left, blank, right

    def sort_by_cin(self) -> None:
        """Sort in place by identity card number, keeping ties in order."""
        self._electors.sort(key=attrgetter("cin"))

    def count_left(self) -> int:
        """Number of electors who voted for a left-wing candidate."""
        return sum(1 for elector in self._electors if elector.is_left)

    def format(self) -> str:
        """Printable listing of every elector."""
        if not self._electors:
            return EMPTY_MESSAGE
        return LIST_HEADER + "".join(str(e) for e in self._electors) + LIST_FOOTER


def merge_lists(left: ElectorList, right: ElectorList) -> ElectorList:
    """Merge two lists sorted by number; on equal numbers the right one comes first."""
    first = deque(left)
    second = deque(right)
    merged: list[Elector] = []
    while first and second:
        if first[0].cin < second[0].cin:
            merged.append(first.popleft())
        else:
            merged.append(second.popleft())
    merged.extend(first)
    merged.extend(second)
    return ElectorList(merged)