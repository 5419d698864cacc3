import pytest

from clrgen.firstfollow import FirstFollow
from clrgen.grammar import augment_grammar
from clrgen.items import Item, ItemSetGenerator
from clrgen.table import ParsingTable, number_productions

CLASSIC = {"S": [["C", "C"]], "C": [["c", "C"], ["d"]]}


def _table(productions, start):
    augmented = augment_grammar(productions, start)
    first_follow = FirstFollow(augmented)
    first = first_follow.compute_first()
    follow = first_follow.compute_follow("S'")
    generator = ItemSetGenerator(augmented, first)
    generator.generate()
    table = ParsingTable(
        augmented, generator.item_sets, generator.transitions, follow, start
    )
    table.generate()
    return table


def test_number_productions_sorted_lhs_order():
    numbering = number_productions(augment_grammar(CLASSIC, "S"))
    assert numbering[("C", ("c", "C"))] == 0
    assert numbering[("S'", ("S",))] == 3
    assert sorted(numbering.values()) == list(range(len(numbering)))


def test_accept_in_state_after_start_symbol():
    table = _table(CLASSIC, "S")
    accept_state = table.transitions[(0, "S")]
    assert table.action_table[accept_state]["$"] == "acc"
    accepting = [s for s, row in table.action_table.items() if "acc" in row.values()]
    assert accepting == [accept_state]


def test_shift_entries_follow_transitions():
    table = _table(CLASSIC, "S")
    shifts = 0
    for state, row in table.action_table.items():
        for symbol, action in row.items():
            if action.startswith("s"):
                shifts += 1
                assert int(action[1:]) == table.transitions[(state, symbol)]
    assert shifts > 0


def test_goto_entries_follow_transitions():
    table = _table(CLASSIC, "S")
    assert table.goto_table
    for state, row in table.goto_table.items():
        for symbol, target in row.items():
            assert symbol in table.productions
            assert target == table.transitions[(state, symbol)]


def test_reduce_numbers_are_valid_rules():
    table = _table(CLASSIC, "S")
    rule_count = len(number_productions(table.productions))
    reduces = [a for row in table.action_table.values() for a in row.values() if a.startswith("r")]
    assert reduces
    assert all(0 <= int(a[1:]) < rule_count for a in reduces)


def test_generate_returns_tables():
    table = _table(CLASSIC, "S")
    assert table.generate() == (table.action_table, table.goto_table)


def test_single_rule_grammar_reduce_row():
    table = _table({"S": [["a"]]}, "S")
    target = table.transitions[(0, "a")]
    assert table.action_table[0]["a"] == f"s{target}"
    assert table.action_table[target] == {"$": "r0"}


def test_format_sections_and_rows():
    table = _table(CLASSIC, "S")
    text = table.format()
    assert text.startswith("\nACTION Table:\n")
    assert "\nGOTO Table:\n" in text
    action_part, goto_part = text.split("\nGOTO Table:\n")
    assert action_part.count("State ") == len(table.action_table)
    assert goto_part.count("State ") == len(table.goto_table)


def test_missing_follow_set_raises():
    items = [frozenset({Item("A", ("a",), 1, "$")})]
    table = ParsingTable({"A": [["a"]]}, items, {}, {}, "A")
    with pytest.raises(KeyError):
        table.generate()