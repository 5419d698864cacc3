"""ACTION and GOTO table construction from LR(1) item sets."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from clrgen.firstfollow import END_MARKER
from clrgen.grammar import AUGMENTED_START
from clrgen.items import Item

ACCEPT = "acc"


def number_productions(
    productions: Mapping[str, Sequence[Sequence[str]]],
) -> dict[tuple[str, tuple[str, ...]], int]:
    """Number every production, left-hand sides in sorted order.

    Alternatives keep their order within a left-hand side. A repeated
    alternative keeps the later number.
    """
    numbering: dict[tuple[str, tuple[str, ...]], int] = {}
    number = 0
    for lhs in sorted(productions):
        for rhs in productions[lhs]:
            numbering[(lhs, tuple(rhs))] = number
            number += 1
    return numbering


class ParsingTable:
    """Builds the ACTION and GOTO tables of an LR parser.

    Shifts and gotos come from the item-set transitions; reductions are
    placed on every symbol of FOLLOW of the reduced non-terminal. Where two
    entries collide, the one written later (in sorted item order) wins.
    """

    def __init__(
        self,
        productions: Mapping[str, Sequence[Sequence[str]]],
        item_sets: Iterable[Iterable[Item]],
        transitions: Mapping[tuple[int, str], int],
        follow: Mapping[str, Iterable[str]],
        start_symbol: str,
    ) -> None:
        self.productions: dict[str, list[tuple[str, ...]]] = {
            lhs: [tuple(rhs) for rhs in rules] for lhs, rules in productions.items()
        }
        self.item_sets: list[frozenset[Item]] = [frozenset(items) for items in item_sets]
        self.transitions: dict[tuple[int, str], int] = dict(transitions)
        self.follow: dict[str, frozenset[str]] = {
            name: frozenset(symbols) for name, symbols in follow.items()
        }
        self.start_symbol = start_symbol
        self.action_table: dict[int, dict[str, str]] = {}
        self.goto_table: dict[int, dict[str, int]] = {}

    def generate(self) -> tuple[dict[int, dict[str, str]], dict[int, dict[str, int]]]:
        """Fill and return the ACTION and GOTO tables."""
        numbering = number_productions(self.productions)
        self.action_table = {}
        self.goto_table = {}

        for state_id, items in enumerate(self.item_sets):
            for item in sorted(items):
                symbol = item.next_symbol
                if symbol is not None:
                    target = self.transitions.get((state_id, symbol))
                    if target is None:
                        continue
                    if symbol in self.productions:
                        self.goto_table.setdefault(state_id, {})[symbol] = target
                    else:
                        self.action_table.setdefault(state_id, {})[symbol] = f"s{target}"
                elif item.lhs == AUGMENTED_START and item.rhs == (self.start_symbol,):
                    self.action_table.setdefault(state_id, {})[END_MARKER] = ACCEPT
                else:
                    rule_number = numbering.get((item.lhs, item.rhs), 0)
                    for lookahead in self.follow[item.lhs]:
                        self.action_table.setdefault(state_id, {})[lookahead] = (
                            f"r{rule_number}"
                        )
        return self.action_table, self.goto_table

    def format(self) -> str:
        """Render both tables, states and symbols in sorted order."""
        return (
            "\nACTION Table:\n"
            + _format_table(self.action_table)
            + "\nGOTO Table:\n"
            + _format_table(self.goto_table)
        )


def _format_table(table: Mapping[int, Mapping[str, object]]) -> str:
    return "".join(
        f"State {state}: "
        + "".join(f"{symbol}={table[state][symbol]} " for symbol in sorted(table[state]))
        + "\n"
        for state in sorted(table)
    )