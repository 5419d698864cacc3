from clrgen.cli import main

GRAMMAR = "S -> C C\nC -> c C | d\n"


def _write(tmp_path, grammar_text, input_text):
    grammar = tmp_path / "grammar.txt"
    grammar.write_text(grammar_text, encoding="utf-8")
    source = tmp_path / "input.txt"
    source.write_text(input_text, encoding="utf-8")
    return str(grammar), str(source)


def test_accepts_valid_input(tmp_path, capsys):
    grammar, source = _write(tmp_path, GRAMMAR, "c d d\n")
    assert main([grammar, source]) == 0
    out = capsys.readouterr().out
    assert "Simulation starts...\nInput Tokens: \nc d d \n" in out
    assert out.rstrip().endswith("Accepted")


def test_rejects_invalid_input(tmp_path, capsys):
    grammar, source = _write(tmp_path, GRAMMAR, "c d\n")
    assert main([grammar, source]) == 0
    out = capsys.readouterr().out
    assert "Accepted" not in out
    assert "Input Tokens: \nc d \n" in out


def test_prints_stages(tmp_path, capsys):
    grammar, source = _write(tmp_path, GRAMMAR, "d d\n")
    main([grammar, source])
    out = capsys.readouterr().out
    assert f"Reading grammar from file: {grammar}" in out
    assert "Augmented Grammar: \nC -> c C | d \nS -> C C \nS' -> S \n" in out
    assert "FIRST(C) = { c d }" in out
    assert out.index("\nFIRST Sets:") < out.index("\nFOLLOW Sets:")
    assert out.index("I0:") < out.index("\nACTION Table:") < out.index("\nGOTO Table:")


def test_missing_grammar_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "input.txt")]) == 1
    assert "Could not open file" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    grammar = tmp_path / "grammar.txt"
    grammar.write_text(GRAMMAR, encoding="utf-8")
    assert main([str(grammar), str(tmp_path / "absent.txt")]) == 1
    captured = capsys.readouterr()
    assert "Could not open file" in captured.err
    assert "Accepted" not in captured.out