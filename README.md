# clrgen

`clrgen` builds a canonical LR(1) parser from a context-free grammar and
runs a step-by-step shift-reduce simulation on a line of input tokens.

Given a grammar, it:

1. reads the productions, taking the left-hand side of the first valid rule
   as the start symbol;
2. augments the grammar with a new start rule `S' -> <start>`;
3. computes the FIRST and FOLLOW sets of every non-terminal;
4. builds the canonical collection of LR(1) item sets and the transitions
   between them;
5. fills in the ACTION and GOTO tables;
6. drives a shift-reduce parse of the input tokens with those tables.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Grammar format

One rule per line: a left-hand side, the arrow `->`, then alternatives
separated by `|`. Symbols are separated by whitespace. Every symbol that
appears on a left-hand side is a non-terminal; every other symbol is a
terminal. Rules for the same left-hand side on several lines are combined.
Blank lines are ignored; lines without `->` as their second token are
logged as warnings and skipped. Empty alternatives are dropped.

```
E -> E + T | T
T -> T * F | F
F -> ( E ) | id
```

The input to parse is the first line of the input file, split on
whitespace:

```
id + id * id
```

The end-of-input marker `$` is supplied automatically.

## Command line

```
clrgen [GRAMMAR] [INPUT]
```

`GRAMMAR` defaults to `grammarInput.txt` and `INPUT` to `input.txt`, both
in the current directory. The command prints the augmented grammar, the
FIRST and FOLLOW sets, every LR(1) item set, the transitions
(`state symbol target`, one per line), the ACTION and GOTO tables, the input
tokens, and `Accepted` if the parse succeeds. It exits with status 1 and a
message on standard error if either file cannot be opened, and 0 otherwise.

## Library use

The stages are available separately:

- `clrgen.grammar` — `parse_grammar(text)` and `read_grammar(path)` return a
  `Grammar` with `productions` and `start`; `augment_grammar(productions,
  start)` returns a copy with `S' -> start` added; `format_productions`
  renders productions as text.
- `clrgen.firstfollow` — `FirstFollow(productions)`, with `compute_first()`,
  `compute_follow(start_symbol)`, `first_of_sequence(symbols)` and
  `format()`. The empty string is written as `ε`.
- `clrgen.items` — `Item` (left-hand side, right-hand side, dot position,
  lookahead) and `ItemSetGenerator(productions, first)`, with `generate()`,
  `closure(items)`, `goto(items, symbol)` and `format()`. After
  `generate()`, `transitions` maps `(state, symbol)` to the target state.
- `clrgen.table` — `ParsingTable(productions, item_sets, transitions,
  follow, start_symbol)` with `generate()`, which returns the ACTION and
  GOTO tables, and `format()`; and `number_productions`, which gives the
  rule numbers used in reduce actions.
- `clrgen.simulator` — `tokenize(text)`, `SimulationState` and
  `ParserSimulator(action_table, goto_table, productions)`, which can be
  stepped through with `prepare(tokens)`, `has_next_step()` and
  `next_step()`, or run to completion with `run(tokens)`, which returns the
  final `SimulationState` (`accepted` or `error` set).

Productions are plain dictionaries mapping each non-terminal to a list of
alternatives, each alternative being a list of symbols. Rule numbers count
the alternatives in sorted order of their left-hand sides, so reduce action
`r3` refers to the fourth alternative in that order. ACTION entries are
`sN` (shift to state N), `rN` (reduce by rule N) and `acc`.

## Limitations

- Reductions are placed on every symbol of FOLLOW of the reduced
  non-terminal, not only on the item's lookahead.
- Conflicts in the tables are not reported: where two entries fall on the
  same cell, the one written later silently wins.
- The grammar format has no way to write an empty alternative, so
  ε-productions cannot be given.
- A rejected input is not reported on the command line; only `Accepted` is
  printed on success. No parse tree is built.