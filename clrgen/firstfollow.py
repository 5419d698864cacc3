"""FIRST and FOLLOW set computation for context-free grammars."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

EPSILON = "ε"
END_MARKER = "$"


class FirstFollow:
    """Computes FIRST and FOLLOW sets by fixed-point iteration.

    Symbols that are keys of ``productions`` are non-terminals; every other
    symbol is a terminal.
    """

    def __init__(self, productions: Mapping[str, Sequence[Sequence[str]]]) -> None:
        self.productions: dict[str, list[list[str]]] = {
            lhs: [list(rhs) for rhs in rules] for lhs, rules in productions.items()
        }
        self.first: dict[str, set[str]] = {}
        self.follow: dict[str, set[str]] = {}

    def _is_nonterminal(self, symbol: str) -> bool:
        return symbol in self.productions

    def compute_first(self) -> dict[str, set[str]]:
        """Compute FIRST for every non-terminal and return the mapping."""
        self.first = {lhs: set() for lhs in self.productions}

        changed = True
        while changed:
            changed = False
            for lhs, rules in self.productions.items():
                target = self.first[lhs]
                for rule in rules:
                    before = len(target)
                    target |= self.first_of_sequence(rule)
                    if len(target) > before:
                        changed = True
        return self.first

    def first_of_sequence(self, symbols: Sequence[str]) -> set[str]:
        """Return FIRST of a symbol sequence; empty sequences give {ε}."""
        if not symbols:
            return {EPSILON}

        result: set[str] = set()
        last = len(symbols) - 1
        for position, symbol in enumerate(symbols):
            if not self._is_nonterminal(symbol):
                result.add(symbol)
                break

            try:
                first_set = self.first[symbol]
            except KeyError:
                raise RuntimeError(
                    "FIRST sets are not computed; call compute_first() first"
                ) from None
            result |= first_set

            if EPSILON not in first_set:
                break
            if position == last:
                result.add(EPSILON)
            else:
                result.discard(EPSILON)
        return result

    def compute_follow(self, start_symbol: str) -> dict[str, set[str]]:
        """Compute FOLLOW for every non-terminal and return the mapping."""
        self.follow = {lhs: set() for lhs in self.productions}
        self.follow.setdefault(start_symbol, set()).add(END_MARKER)

        changed = True
        while changed:
            changed = False
            for lhs, rules in self.productions.items():
                for rule in rules:
                    for position, symbol in enumerate(rule):
                        if not self._is_nonterminal(symbol):
                            continue
                        target = self.follow[symbol]
                        before = len(target)

                        beta = rule[position + 1:]
                        if beta:
                            first_beta = self.first_of_sequence(beta)
                            target |= first_beta - {EPSILON}
                            if EPSILON in first_beta:
                                target |= self.follow[lhs]
                        else:
                            target |= self.follow[lhs]

                        if len(target) > before:
                            changed = True
        return self.follow

    def format(self) -> str:
        """Render the FIRST and FOLLOW sets as text, sorted by symbol."""
        return (
            "\nFIRST sets:\n"
            + _format_sets("FIRST", self.first)
            + "\nFOLLOW sets:\n"
            + _format_sets("FOLLOW", self.follow)
        )


def _format_sets(label: str, sets: Mapping[str, Iterable[str]]) -> str:
    return "".join(
        f"{label}({name}) = {{ " + "".join(f"{s} " for s in sorted(sets[name])) + "}\n"
        for name in sorted(sets)
    )