"""Text renderings of a word index and reconstruction of the indexed text."""

from __future__ import annotations

from os import PathLike

from structalgo.textindex import Index, WordNode, lowercase_ascii, upper_char

EMPTY_INDEX = "Aucun mot dans l'index\n"
NO_INITIAL = "_"


def _capitalize(word: str) -> str:
    return upper_char(word[:1]) + word[1:]


def format_node(node: WordNode) -> str:
    """The word, capitalised, followed by each of its positions."""
    lines = [f"|-- {_capitalize(node.word)}\n"]
    lines.extend(
        f"|---- (l:{pos.line}, o:{pos.order}, p:{pos.sentence})\n"
        for pos in node.positions
    )
    lines.append("|\n")
    return "".join(lines)


def format_index(index: Index) -> str:
    """Every word in alphabetical order, grouped under its initial."""
    if index.root is None:
        return EMPTY_INDEX
    parts: list[str] = []
    last = NO_INITIAL
    for node in index:
        initial = upper_char(node.word[:1])
        if last == NO_INITIAL or initial != last:
            parts.append(f"\n{initial}\n")
            last = initial
        parts.append(format_node(node))
    return "".join(parts)


def format_max(index: Index) -> str:
    """A sentence naming the most frequent word and its count."""
    node = index.most_frequent()
    if node is None:
        return "\n" + EMPTY_INDEX
    return (
        f"\nLe mot le plus apparu est : {node.word}, "
        f"avec {node.occurrences} occurences\n"
    )


def format_occurrences(index: Index, word: str) -> str:
    """Each sentence in which ``word`` occurs, with the word's line and rank."""
    word = lowercase_ascii(word)
    node = index.find(word)
    if node is None:
        return f"Le mot '{word}' n'est pas dans l'index\n"
    parts = [
        f'Mot = "{_capitalize(word)}"\n',
        f"Occurences = {node.occurrences}\n",
    ]
    for pos in node.positions:
        if not 1 <= pos.sentence <= len(index.sentences):
            raise LookupError(
                f"sentence {pos.sentence} of {word!r} is not terminated by a period"
            )
        sentence = index.sentences[pos.sentence - 1]
        text = " ".join([_capitalize(sentence[0]), *sentence[1:]]) if sentence else ""
        parts.append(f"| Ligne {pos.line}, mot {pos.order} : {text}.\n")
    return "".join(parts)


def rebuild_text(index: Index) -> str:
    """The indexed text, line by line, with capitals and periods restored."""
    if not index.sentences:
        raise ValueError("the index holds no complete sentence")
    sentences = iter(index.sentences)
    current = next(sentences)
    position = 0
    at_start = True
    out: list[str] = []
    for line in index.lines:
        for word in line:
            if position + 1 < len(current):
                position += 1
                out.append((_capitalize(word) if at_start else word) + " ")
                at_start = False
            else:
                following = next(sentences, None)
                if following is not None:
                    current = following
                    position = 0
                out.append((_capitalize(word) if at_start else word) + ". ")
                at_start = True
        out.append("\n")
    return "".join(out)


def write_text(index: Index, path: str | PathLike[str]) -> None:
    """Write the rebuilt text to ``path``."""
    text = rebuild_text(index)
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text)