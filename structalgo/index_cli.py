"""Interactive menu to load a text file into a word index and explore it."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence, TextIO

from structalgo.textindex import Index
from structalgo.textindex_render import (
    format_index,
    format_max,
    format_occurrences,
    write_text,
)

QUIT = 8
RULE = "========================================================"
MENU = (
    f"\n{RULE}\n"
    "Choisissez une option :\n"
    "1 - Charger un fichier\n"
    "2 - Caracteristiques de l'index\n"
    "3 - Afficher index\n"
    "4 - Rechercher un mot\n"
    "5 - Afficher le mot avec le maximum d'apparitions\n"
    "6 - Afficher les occurences d'un mot\n"
    "7 - Construire un texte a partir de l'index\n"
    "8 - Quitter\n"
    f"{RULE}\n"
)
NEED_FILE_SEARCH = "\nVous devez charger un fichier avant de pouvoir rechercher un mot."


def _tokens(stream: TextIO) -> Iterator[str]:
    while True:
        line = stream.readline()
        if not line:
            return
        yield from line.split()


def _ask(tokens: Iterator[str], prompt: str) -> str:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _characteristics(index: Index) -> None:
    print(f"\nNombre de mots differents : {index.distinct_words}")
    print(f"Nombre de mots total : {index.total_words}")
    print(f"Hauteur de l'arbre : {index.height()}")
    if index.is_balanced():
        print("\nL'arbre est equilibre.")
    else:
        print("\nL'arbre n'est pas equilibre")


def _search(index: Index, word: str) -> None:
    node = index.find(word)
    word = word.lower() if node is None else node.word
    if node is None:
        print(f"\nLe mot '{word}' n'est pas present dans l'index.")
        return
    print(
        f"\nLe mot '{word}' est present {node.occurrences} fois dans l'index."
        "\nIl apparait :"
    )
    for pos in node.positions:
        print(f"  - Ligne {pos.line}, ordre {pos.order}, phrase {pos.sentence}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the index menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Index the words of a text file.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    index = Index()
    loaded = False
    choice = 0
    try:
        while choice != QUIT:
            print(MENU, end="")
            token = _ask(tokens, "\n-> ")
            try:
                choice = int(token)
            except ValueError:
                choice = 0

            if choice == 1:
                if loaded:
                    print("\nVous avez deja charge un fichier.")
                    continue
                filename = _ask(tokens, "\nEntrez le nom du fichier a charger : ")
                print()
                try:
                    index.index_file(filename)
                except OSError:
                    print("Erreur: fichier non trouve")
                else:
                    print("\nFichier charge avec succes")
                    loaded = True
            elif choice == 2:
                if loaded:
                    _characteristics(index)
                else:
                    print(
                        "\nVous devez charger un fichier avant de pouvoir afficher "
                        "les caracteristiques de l'index."
                    )
            elif choice == 3:
                if loaded:
                    print(format_index(index), end="")
                else:
                    print("\nVous devez charger un fichier.")
            elif choice == 4:
                if loaded:
                    _search(index, _ask(tokens, "\nEntrez le mot a rechercher: "))
                else:
                    print(NEED_FILE_SEARCH)
            elif choice == 5:
                if loaded:
                    print(format_max(index), end="")
                else:
                    print(
                        "\nVous devez charger un fichier avant de pouvoir afficher "
                        "le mot avec le maximum d'apparitions."
                    )
            elif choice == 6:
                if loaded:
                    word = _ask(tokens, "\nEntrez le mot a rechercher: ")
                    try:
                        print(format_occurrences(index, word), end="")
                    except LookupError as error:
                        print(f"Erreur: {error}")
                else:
                    print(NEED_FILE_SEARCH)
            elif choice == 7:
                if loaded:
                    filename = _ask(tokens, "\nEntrez le nom du fichier de sortie : ")
                    try:
                        write_text(index, filename)
                    except OSError:
                        print("Erreur lors de l'ouverture du fichier")
                    except ValueError as error:
                        print(f"Erreur: {error}")
                else:
                    print(
                        "\nVous devez charger un fichier avant de pouvoir "
                        "construire un texte."
                    )
            elif choice == QUIT:
                if loaded:
                    print("\nVous avez quitte le programme.")
            else:
                print("\nChoix invalide")
    except EOFError:
        print()
    return 0