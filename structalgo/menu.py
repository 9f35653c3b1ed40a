"""A text menu whose entries are chosen by typing their label."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

MAX_ITEMS = 20
MAX_ITEM_LENGTH = 59
CLEAR_SCREEN = "\033[H\033[2J"
PROMPT = "Entrez menu désiré : "


@dataclass
class Menu:
    """An ordered list of at most 20 entries of at most 59 characters."""

    items: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)
        if len(self.items) > MAX_ITEMS:
            raise ValueError(f"a menu holds at most {MAX_ITEMS} entries")
        for item in self.items:
            if len(item) > MAX_ITEM_LENGTH:
                raise ValueError(
                    f"menu entries are at most {MAX_ITEM_LENGTH} characters: {item!r}"
                )

    def max_length(self) -> int:
        """Length of the longest entry, or -1 for an empty menu."""
        return max((len(item) for item in self.items), default=-1)

    def render(self) -> str:
        """Numbered entries, each centred against the longest one."""
        width = self.max_length()
        return "".join(
            f"{number} {' ' * ((width - len(item)) // 2)}{item}\n"
            for number, item in enumerate(self.items, start=1)
        )

    def choose(self, stream: TextIO, out: TextIO) -> int:
        """Prompt until an entry is typed (its number) or q/Q or end of input (0)."""
        while True:
            out.write(CLEAR_SCREEN)
            out.write("\n")
            out.write(self.render())
            out.write(PROMPT)
            out.flush()
            line = stream.readline()
            if not line:
                return 0
            answer = line.rstrip("\n")
            for number, item in enumerate(self.items, start=1):
                if answer == item:
                    return number
            if answer in ("q", "Q"):
                return 0