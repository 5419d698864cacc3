"""Step-by-step simulation of a table-driven LR parser over a token list."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

from clrgen.firstfollow import END_MARKER
from clrgen.table import ACCEPT


def tokenize(text: str) -> list[str]:
    """Split the first line of ``text`` into whitespace-separated tokens."""
    lines = text.splitlines()
    return lines[0].split() if lines else []


@dataclass(frozen=True)
class SimulationState:
    """A snapshot of the parser: both stacks, input position and outcome."""

    state_stack: tuple[int, ...] = (0,)
    symbol_stack: tuple[str, ...] = ()
    input_pointer: int = 0
    current_action: str = ""
    accepted: bool = False
    error: bool = False

    @property
    def finished(self) -> bool:
        """True once the input has been accepted or rejected."""
        return self.accepted or self.error


class ParserSimulator:
    """Runs shift/reduce steps driven by ACTION and GOTO tables.

    Reduce actions ``rN`` refer to productions numbered with left-hand
    sides in sorted order and alternatives in their given order.
    """

    def __init__(
        self,
        action_table: Mapping[int, Mapping[str, str]],
        goto_table: Mapping[int, Mapping[str, int]],
        productions: Mapping[str, Sequence[Sequence[str]]],
    ) -> None:
        self.action_table: dict[int, dict[str, str]] = {
            state: dict(row) for state, row in action_table.items()
        }
        self.goto_table: dict[int, dict[str, int]] = {
            state: dict(row) for state, row in goto_table.items()
        }
        self.rules: list[tuple[str, tuple[str, ...]]] = [
            (lhs, tuple(rhs)) for lhs in sorted(productions) for rhs in productions[lhs]
        ]
        self.tokens: list[str] = []
        self.states: list[SimulationState] = []
        self._step = 0

    @property
    def current(self) -> SimulationState:
        """The state at the current step; raises IndexError before prepare()."""
        return self.states[self._step]

    def prepare(self, tokens: Iterable[str]) -> None:
        """Reset the simulation to the initial state for ``tokens``."""
        self.tokens = list(tokens)
        self.states = [SimulationState()]
        self._step = 0

    def has_next_step(self) -> bool:
        """True while the simulation can still advance."""
        if not self.states:
            return False
        return self._step < len(self.states) - 1 or not self.states[-1].finished

    def next_step(self) -> None:
        """Advance one step; does nothing once the simulation has finished.

        Raises ValueError for an action that is malformed or names an
        unknown rule.
        """
        if not self.has_next_step():
            return
        if self._step == len(self.states) - 1:
            self.states.append(self._advance(self.states[-1]))
        self._step += 1

    def run(self, tokens: Iterable[str]) -> SimulationState:
        """Simulate the parser over ``tokens`` to the end; return the final state."""
        self.prepare(tokens)
        while self.has_next_step():
            self.next_step()
        return self.states[-1]

    def _lookahead(self, pointer: int) -> str:
        return self.tokens[pointer] if pointer < len(self.tokens) else END_MARKER

    def _advance(self, state: SimulationState) -> SimulationState:
        top = state.state_stack[-1]
        symbol = self._lookahead(state.input_pointer)
        action = self.action_table.get(top, {}).get(symbol)
        if action is None:
            return replace(state, error=True)

        if action == ACCEPT:
            return replace(state, current_action=action, accepted=True)

        kind, argument = action[:1], action[1:]
        if kind == "s":
            return replace(
                state,
                current_action=action,
                state_stack=state.state_stack + (int(argument),),
                symbol_stack=state.symbol_stack + (symbol,),
                input_pointer=state.input_pointer + 1,
            )
        if kind == "r":
            return self._reduce(state, action, int(argument))
        raise ValueError(f"unrecognised parser action: {action!r}")

    def _reduce(self, state: SimulationState, action: str, rule_number: int) -> SimulationState:
        if not 0 <= rule_number < len(self.rules):
            raise ValueError(f"reduce action names unknown rule {rule_number}")
        lhs, rhs = self.rules[rule_number]

        states = list(state.state_stack)
        symbols = list(state.symbol_stack)
        for _ in rhs:
            if symbols:
                symbols.pop()
            if states:
                states.pop()
        if not states:
            return replace(state, current_action=action, error=True)

        target = self.goto_table.get(states[-1], {}).get(lhs, 0)
        return replace(
            state,
            current_action=action,
            state_stack=tuple(states) + (target,),
            symbol_stack=tuple(symbols) + (lhs,),
        )