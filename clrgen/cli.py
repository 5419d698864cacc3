"""Command line: build a canonical LR(1) parser for a grammar and run it on input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from clrgen.firstfollow import FirstFollow
from clrgen.grammar import AUGMENTED_START, augment_grammar, format_productions, read_grammar
from clrgen.items import ItemSetGenerator
from clrgen.simulator import ParserSimulator, tokenize
from clrgen.table import ParsingTable

DEFAULT_GRAMMAR = "grammarInput.txt"
DEFAULT_INPUT = "input.txt"


def _format_sets(label: str, sets: Mapping[str, set[str]]) -> str:
    return "".join(
        f"{label}({name}) = {{ " + "".join(f"{s} " for s in sorted(sets[name])) + "}\n"
        for name in sorted(sets)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Build the tables, print every stage and simulate the parser on the input."""
    parser = argparse.ArgumentParser(
        prog="clrgen",
        description="Build a canonical LR(1) parser and run it on an input line.",
    )
    parser.add_argument("grammar", nargs="?", default=DEFAULT_GRAMMAR, help="grammar file")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="input token file")
    args = parser.parse_args(argv)

    try:
        grammar = read_grammar(args.grammar)
    except OSError:
        print(f"Error: Could not open file '{args.grammar}'", file=sys.stderr)
        return 1
    print(f"Reading grammar from file: {args.grammar}")

    augmented = augment_grammar(grammar.productions, grammar.start)
    print("Augmented Grammar: ")
    print(format_productions(augmented), end="")

    first_follow = FirstFollow(augmented)
    first = first_follow.compute_first()
    follow = first_follow.compute_follow(AUGMENTED_START)
    print("\nFIRST Sets:")
    print(_format_sets("FIRST", first), end="")
    print("\nFOLLOW Sets:")
    print(_format_sets("FOLLOW", follow), end="")

    generator = ItemSetGenerator(augmented, first)
    item_sets = generator.generate()
    print(generator.format(), end="")
    for (state, symbol), target in sorted(generator.transitions.items()):
        print(f"{state} {symbol} {target}")

    table = ParsingTable(augmented, item_sets, generator.transitions, follow, grammar.start)
    action_table, goto_table = table.generate()
    print(table.format(), end="")

    print("Simulation starts...")
    try:
        text = Path(args.input).read_text(encoding="utf-8")
    except OSError:
        print(f"Error: Could not open file '{args.input}'", file=sys.stderr)
        return 1
    tokens = tokenize(text)
    print("Input Tokens: ")
    print("".join(f"{token} " for token in tokens))

    final = ParserSimulator(action_table, goto_table, augmented).run(tokens)
    if final.accepted:
        print("Accepted")
    return 0


if __name__ == "__main__":
    sys.exit(main())