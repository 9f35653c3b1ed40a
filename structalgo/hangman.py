"""A console hangman game with a limited number of wrong guesses."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Sequence

MAX_ATTEMPTS = 10
HIDDEN = "*"


def reveal(found: str, secret: str, letter: str) -> tuple[str, bool]:
    """Uncover every occurrence of ``letter``; report whether it was in ``secret``."""
    if len(found) != len(secret):
        raise ValueError("found and secret must have the same length")
    revealed = "".join(
        letter if char == letter else shown for shown, char in zip(found, secret)
    )
    return revealed, letter in secret


@dataclass
class Hangman:
    """State of one game: the secret, what is revealed and the attempts left."""

    secret: str
    attempts: int = MAX_ATTEMPTS
    found: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("the secret word must not be empty")
        self.found = HIDDEN * len(self.secret)

    def guess(self, letter: str) -> bool:
        """Play one letter; a wrong letter costs an attempt."""
        if self.won() or self.lost():
            raise RuntimeError("the game is over")
        if len(letter) != 1:
            raise ValueError("a guess is a single character")
        self.found, good = reveal(self.found, self.secret, letter)
        if not good:
            self.attempts -= 1
        return good

    def masked(self) -> str:
        """The word with unfound letters hidden."""
        return self.found

    def won(self) -> bool:
        """True when no letter is hidden any more."""
        return HIDDEN not in self.found

    def lost(self) -> bool:
        """True when no attempt is left."""
        return self.attempts <= 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play hangman on standard input and output."""
    parser = argparse.ArgumentParser(description="Play a game of hangman.")
    parser.parse_args(argv)

    print("Entrez le mot secret : ", end="", flush=True)
    words = sys.stdin.readline().split()
    if not words:
        print("error: no secret word given", file=sys.stderr)
        return 1
    game = Hangman(words[0])
    print("\n" * 12, end="")

    while not game.lost() and not game.won():
        print(f"{game.attempts} coups restants")
        print(f"Mot : {game.masked()}")
        print("Caractere : ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print("error: unexpected end of input", file=sys.stderr)
            return 1
        game.guess(line[0])

    if game.lost():
        print(f"Vous avez perdu, le mot etait {game.secret}")
    else:
        print(f"Vous avez gagne, le mot etait bien {game.masked()}")
    return 0