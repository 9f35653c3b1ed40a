"""Interactive menu managing a list of electors and second-round estimates."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from structalgo.electors import BLANK_CHOICE, ElectorList, merge_lists

MENU = (
    "\n************************ Voici le menu *******************\n"
    "\n  1. Ajouter des electeurs,\n  2. Supprimer un electeur, \n"
    "  3. Rechercher un electeur, \n  4. Afficher la liste des electeurs, \n"
    "  5. Calculer le nombre d'electeurs,\n"
    "  6. Decouper la liste en trois sous-listes selon les choix: droite, gauche et blanc\n"
    "    - Trier les sous-listes\n    - Afficher les sous-listes,\n"
    "    - Fusionner les deux sous-listes : gauche et droite\n"
    "  7. Calculer les pourcentages de gauche et de droite pour le 2ème tour,\n"
    "  8. Liberer les listes\n  9. Quitter\n"
)
CHOICE_PROMPT = "\nChoix : \nNOM1 : 1\nNOM2 : 2\nNOM3 : 3\nNOM4 : 4\nAUTRE / BLANC : 5\n-> "
NOT_FOUND = "\nCet electeur n'est pas dans la liste\n"
QUIT = 9


def normalize_choice(choice: int) -> int:
    """Votes other than 1 to 4 count as blank (5)."""
    return choice if choice in (1, 2, 3, 4) else BLANK_CHOICE


def left_right_percentages(electors: ElectorList) -> tuple[float, float]:
    """Percentages of left-wing and right-wing votes among the electors."""
    if len(electors) == 0:
        raise ValueError("no electors to count")
    left = electors.count_left() / len(electors) * 100
    return left, 100 - left


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _read_int() -> int:
    words = _read_line().split()
    if not words:
        raise ValueError("no number given")
    return int(words[0])


def _ask(prompt: str) -> None:
    print(prompt, end="", flush=True)


def _add(electors: ElectorList) -> None:
    _ask("\nNom d'electeur : ")
    name = _read_line()
    _ask("\nCIN : ")
    try:
        cin = _read_int()
    except ValueError:
        print("\nNumero invalide\n")
        return
    _ask(CHOICE_PROMPT)
    try:
        choice = _read_int()
    except ValueError:
        choice = BLANK_CHOICE
    electors.add(name, cin, normalize_choice(choice))
    print("\nL'electeur a ete ajoute a la liste")


def _ask_cin(prompt: str) -> int | None:
    _ask(prompt)
    try:
        return _read_int()
    except ValueError:
        print("\nNumero invalide\n")
        return None


def _split_and_merge(electors: ElectorList) -> ElectorList:
    left, blank, right = electors.split()
    for part in (blank, right, left):
        part.sort_by_cin()
    print("\nListe blanc : ")
    print(blank.format(), end="")
    print("\nListe droite : ")
    print(right.format(), end="")
    print("\nListe gauche : ")
    print(left.format(), end="")
    return merge_lists(left, right)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the elector menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage a list of electors.")
    parser.add_argument(
        "--pause", type=float, default=3.0, help="seconds to wait after each action"
    )
    args = parser.parse_args(argv)

    electors = ElectorList()
    command = 0
    try:
        while command != QUIT:
            print(MENU)
            _ask("\n\nEntrer le numero du menu : ")
            try:
                command = _read_int()
            except ValueError:
                command = 0

            if command == 1:
                _add(electors)
            elif command == 2:
                cin = _ask_cin("\nCIN de l'electeur a supprimer : ")
                if cin is not None:
                    try:
                        electors.remove(cin)
                    except KeyError:
                        print(NOT_FOUND, end="")
                    else:
                        print("\nL'electeur a ete supprime de la liste")
            elif command == 3:
                cin = _ask_cin("\nCIN de l'electeur a rechercher : ")
                if cin is not None:
                    found = electors.find(cin)
                    if found is None:
                        print(NOT_FOUND, end="")
                    else:
                        print("\nElecteur trouve !\nInformations concernant l'electeur :")
                        print(found, end="")
            elif command == 4:
                print(electors.format(), end="")
            elif command == 5:
                print(f"\nIl y a {len(electors)} electeurs")
            elif command == 6:
                electors = _split_and_merge(electors)
            elif command == 7:
                try:
                    left, right = left_right_percentages(electors)
                except ValueError:
                    print(EMPTY_PERCENT)
                else:
                    print(f"\nVoici le pourcetage d'electeur de gauche au second tour: {left:.2f} %")
                    print(f"\nVoici le pourcetage d'electeur de droite au second tour: {right:.2f} %")
            elif command == 8:
                electors = ElectorList()
                print("\nLa liste a ete libérée")
            elif command == QUIT:
                print("\nQuitter")
            else:
                print("\nVeuillez entrer une instruction valide")

            if args.pause > 0:
                time.sleep(args.pause)
    except EOFError:
        print()
    return 0


EMPTY_PERCENT = "\nAucun electeur, impossible de calculer les pourcentages"