"""Canonical LR(1) item sets and the transitions between them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from clrgen.firstfollow import END_MARKER, EPSILON
from clrgen.grammar import AUGMENTED_START

ItemSet = frozenset["Item"]


@dataclass(frozen=True, order=True)
class Item:
    """An LR(1) item: a production with a dot position and one lookahead.

    Items order by left-hand side, right-hand side, dot and lookahead.
    """

    lhs: str
    rhs: tuple[str, ...]
    dot: int
    lookahead: str

    def __post_init__(self) -> None:
        if not isinstance(self.rhs, tuple):
            object.__setattr__(self, "rhs", tuple(self.rhs))

    @property
    def is_complete(self) -> bool:
        """True when the dot stands after the last symbol."""
        return self.dot >= len(self.rhs)

    @property
    def next_symbol(self) -> str | None:
        """The symbol right after the dot, or None for a complete item."""
        return None if self.is_complete else self.rhs[self.dot]

    def advance(self) -> Item:
        """Return the item with the dot moved one symbol to the right."""
        return Item(self.lhs, self.rhs, self.dot + 1, self.lookahead)

    def __str__(self) -> str:
        body = "".join(
            (". " if position == self.dot else "") + f"{symbol} "
            for position, symbol in enumerate(self.rhs)
        )
        if self.dot == len(self.rhs):
            body += ". "
        return f"{self.lhs} -> {body}, {self.lookahead}"


class ItemSetGenerator:
    """Builds the canonical collection of LR(1) item sets.

    ``productions`` must contain the augmented start rule ``S'``; ``first``
    holds the FIRST set of every non-terminal.
    """

    def __init__(
        self,
        productions: Mapping[str, Sequence[Sequence[str]]],
        first: Mapping[str, Iterable[str]],
    ) -> None:
        self.productions: dict[str, list[tuple[str, ...]]] = {
            lhs: [tuple(rhs) for rhs in rules] for lhs, rules in productions.items()
        }
        self.first: dict[str, frozenset[str]] = {
            name: frozenset(symbols) for name, symbols in first.items()
        }
        self.item_sets: list[ItemSet] = []
        self.transitions: dict[tuple[int, str], int] = {}

    def _grammar_symbols(self) -> list[str]:
        symbols: set[str] = set()
        for lhs, rules in self.productions.items():
            symbols.add(lhs)
            for rule in rules:
                symbols.update(rule)
        return sorted(symbols)

    def generate(self) -> list[ItemSet]:
        """Build all item sets and transitions; return the item sets.

        States are numbered in the order they are discovered, one pass over
        the known states at a time, with symbols visited in sorted order.
        """
        start_item = Item(
            AUGMENTED_START, self.productions[AUGMENTED_START][0], 0, END_MARKER
        )
        self.item_sets = [self.closure({start_item})]
        self.transitions = {}
        index: dict[ItemSet, int] = {self.item_sets[0]: 0}
        symbols = self._grammar_symbols()

        changed = True
        while changed:
            changed = False
            discovered = list(self.item_sets)
            for state_id, items in enumerate(self.item_sets):
                for symbol in symbols:
                    target = self.goto(items, symbol)
                    if not target:
                        continue
                    target_id = index.get(target)
                    if target_id is None:
                        discovered.append(target)
                        target_id = len(discovered) - 1
                        index[target] = target_id
                        changed = True
                    self.transitions[(state_id, symbol)] = target_id
            self.item_sets = discovered
        return self.item_sets

    def _first_of_remaining(self, symbols: Iterable[str]) -> set[str]:
        result: set[str] = set()
        for symbol in symbols:
            if symbol not in self.productions:
                result.add(symbol)
                break
            first_set = self.first[symbol]
            result |= first_set
            if EPSILON not in first_set:
                break
        return result

    def closure(self, items: Iterable[Item]) -> ItemSet:
        """Return the LR(1) closure of a set of items."""
        result = set(items)
        changed = True
        while changed:
            changed = False
            added: set[Item] = set()
            for item in result:
                symbol = item.next_symbol
                if symbol is None or symbol not in self.productions:
                    continue
                lookaheads = self._first_of_remaining(
                    [*item.rhs[item.dot + 1:], item.lookahead]
                )
                for production in self.productions[symbol]:
                    for lookahead in lookaheads:
                        candidate = Item(symbol, production, 0, lookahead)
                        if candidate not in result:
                            added.add(candidate)
                            changed = True
            result |= added
        return frozenset(result)

    def goto(self, items: Iterable[Item], symbol: str) -> ItemSet:
        """Advance the dot over ``symbol`` in every item that allows it, then close."""
        moved = {item.advance() for item in items if item.next_symbol == symbol}
        return self.closure(moved)

    def format(self) -> str:
        """Render every item set, one item per line, items in sorted order."""
        blocks = []
        for state_id, items in enumerate(self.item_sets):
            lines = "".join(f"{item}\n" for item in sorted(items))
            blocks.append(f"I{state_id}:\n{lines}\n")
        return "".join(blocks)