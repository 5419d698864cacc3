"""Reading context-free grammars from text and augmenting them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

logger = logging.getLogger(__name__)

AUGMENTED_START = "S'"
ARROW = "->"

Productions = dict[str, list[list[str]]]


@dataclass
class Grammar:
    """A grammar: productions keyed by left-hand side, plus the start symbol."""

    productions: Productions = field(default_factory=dict)
    start: str = ""


def parse_grammar(text: str) -> Grammar:
    """Parse grammar text with one ``LHS -> alt | alt ...`` rule per line.

    Blank lines are ignored. Lines without a left-hand side and an ``->``
    token are logged and skipped. The first valid rule's left-hand side
    becomes the start symbol.
    """
    grammar = Grammar()
    first_production = True

    for line in text.splitlines():
        if not line:
            continue

        parts = line.split(None, 2)
        if len(parts) < 2:
            logger.warning("Invalid format in line: %s", line)
            continue

        lhs, arrow = parts[0], parts[1]
        if arrow != ARROW:
            logger.warning("Invalid production arrow in line: %s", line)
            continue

        if first_production:
            grammar.start = lhs
            first_production = False

        rest = parts[2] if len(parts) == 3 else ""
        for alternative in rest.split("|"):
            symbols = alternative.split()
            if symbols:
                grammar.productions.setdefault(lhs, []).append(symbols)

    return grammar


def read_grammar(path: str | PathLike[str]) -> Grammar:
    """Read and parse a grammar file; raises OSError if it cannot be opened."""
    return parse_grammar(Path(path).read_text(encoding="utf-8"))


def format_productions(productions: Productions) -> str:
    """Render productions one rule per line, in sorted left-hand-side order."""
    lines = []
    for lhs in sorted(productions):
        alternatives = "| ".join(
            "".join(f"{symbol} " for symbol in rhs) for rhs in productions[lhs]
        )
        lines.append(f"{lhs} {ARROW} {alternatives}\n")
    return "".join(lines)


def augment_grammar(productions: Productions, start: str) -> Productions:
    """Return a copy of the productions with the rule ``S' -> start`` added."""
    augmented = {lhs: [list(rhs) for rhs in rules] for lhs, rules in productions.items()}
    augmented[AUGMENTED_START] = [[start]]
    return augmented