import pytest

from ossim.sic import Machine, Operation, instruction_set, main

VARIANT_NAMES = ["standard", "div-last", "mover-last", "io-first", "print-first"]


def assemble(variant, *instructions):
    codes = {op: code for code, op in instruction_set(variant).items()}
    return [codes[op] * 10000 + digit * 1000 + address for op, digit, address in instructions]


def run_machine(machine, inputs=()):
    output = []
    machine.run(read=iter(inputs).__next__, write=output.append)
    return output


def test_standard_table_matches_opcodes():
    table = instruction_set("standard")
    assert table[0] is Operation.STOP
    assert table[4] is Operation.DIV
    assert table[9] is Operation.READ
    assert table[10] is Operation.PRINT


def test_alternative_tables_pin_opcodes():
    assert instruction_set("io-first")[1] is Operation.READ
    assert instruction_set("io-first")[10] is Operation.COMP
    assert instruction_set("print-first")[10] is Operation.ADD
    assert instruction_set("div-last")[8] is Operation.DIV
    assert instruction_set("mover-last")[9] is Operation.MOVER


@pytest.mark.parametrize("variant", VARIANT_NAMES)
def test_every_table_is_a_bijection(variant):
    table = instruction_set(variant)
    assert sorted(table) == list(range(11))
    assert set(table.values()) == set(Operation)


def test_unknown_variant_raises():
    with pytest.raises(ValueError):
        instruction_set("nonexistent")
    with pytest.raises(ValueError):
        Machine("nonexistent")


@pytest.mark.parametrize("variant", VARIANT_NAMES)
def test_add_program_in_every_variant(variant):
    machine = Machine(variant)
    machine.load(assemble(
        variant,
        (Operation.READ, 0, 20),
        (Operation.READ, 0, 21),
        (Operation.MOVER, 1, 20),
        (Operation.ADD, 1, 21),
        (Operation.MOVEM, 1, 22),
        (Operation.PRINT, 0, 22),
        (Operation.STOP, 0, 0),
    ))
    first, second = 5, 7
    assert run_machine(machine, [first, second]) == [first + second]
    assert machine.memory[22] == first + second


def test_listing_uses_six_digits():
    machine = Machine()
    machine.load([1, 100012, -5])
    assert machine.listing() == ["000001", "100012", "-00005"]


def test_load_appends_after_previous_words():
    machine = Machine()
    machine.load([1])
    machine.load([2])
    assert machine.listing() == ["000001", "000002"]
    assert machine.size == 2


def test_load_rejects_too_many_words():
    machine = Machine()
    with pytest.raises(ValueError):
        machine.load([0] * 101)


def test_load_file_round_trip(tmp_path):
    path = tmp_path / "prog.txt"
    path.write_text("90010\n100010\n0\n")
    machine = Machine()
    machine.load_file(path)
    assert machine.listing() == ["090010", "100010", "000000"]
    assert run_machine(machine, [42]) == [42]


def test_load_file_rejects_garbage(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("12 abc\n")
    with pytest.raises(ValueError):
        Machine().load_file(path)


def test_division_truncates_toward_zero():
    machine = Machine()
    words = assemble(
        "standard",
        (Operation.MOVER, 1, 5),
        (Operation.DIV, 1, 6),
        (Operation.MOVEM, 1, 7),
        (Operation.PRINT, 0, 7),
        (Operation.STOP, 0, 0),
    )
    machine.load(words + [-7, 2])
    assert run_machine(machine) == [-3]


def test_conditional_branch_loop():
    program = assemble(
        "standard",
        (Operation.PRINT, 0, 30),
        (Operation.MOVER, 1, 30),
        (Operation.SUB, 1, 31),
        (Operation.MOVEM, 1, 30),
        (Operation.COMP, 1, 32),
        (Operation.BC, 4, 0),
        (Operation.STOP, 0, 0),
    )
    words = program + [0] * (33 - len(program))
    words[30], words[31], words[32] = 3, 1, 0
    machine = Machine()
    machine.load(words)
    assert run_machine(machine) == [3, 2, 1]


def test_unconditional_branch_skips_instruction():
    program = assemble(
        "standard",
        (Operation.BC, 6, 2),
        (Operation.PRINT, 0, 5),
        (Operation.PRINT, 0, 6),
        (Operation.STOP, 0, 0),
    )
    machine = Machine()
    machine.load(program + [0, 111, 222])
    assert run_machine(machine) == [222]


def test_invalid_register_raises():
    machine = Machine()
    machine.load(assemble("standard", (Operation.ADD, 0, 10)))
    with pytest.raises(ValueError):
        machine.run(read=lambda: 0, write=lambda value: None)


def test_address_outside_memory_raises():
    machine = Machine()
    machine.load(assemble("standard", (Operation.PRINT, 0, 500)))
    with pytest.raises(ValueError):
        machine.run(read=lambda: 0, write=lambda value: None)


def test_division_by_zero_raises():
    machine = Machine()
    machine.load(assemble("standard", (Operation.DIV, 1, 50), (Operation.STOP, 0, 0)))
    with pytest.raises(ZeroDivisionError):
        machine.run(read=lambda: 0, write=lambda value: None)


def test_main_loads_and_prints(tmp_path, monkeypatch, capsys):
    path = tmp_path / "prog.txt"
    path.write_text("100012 0\n")
    answers = iter(["1", str(path), "2", "4"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "100012\n000000\n" in out


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "missing.txt"
    answers = iter(["1", str(missing)])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 1
    assert f"File {missing} not found." in capsys.readouterr().out