import io
import os
import sys

import pytest

from ossim.shell import (
    count,
    count_occurrences,
    list_dir,
    main,
    run_command,
    search_all,
    search_first,
    typeline,
)

LINES = ["alpha one\n", "beta two\n", "gamma beta\n", "delta\n", "epsilon beta\n"]


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("".join(LINES), encoding="utf-8")
    return path


def test_search_first_finds_earliest_line(sample):
    assert search_first(sample, "beta") == (2, LINES[1])


def test_search_first_none_when_absent(sample):
    assert search_first(sample, "zeta") is None


def test_search_all_lists_every_match(sample):
    assert search_all(sample, "beta") == [(2, LINES[1]), (3, LINES[2]), (5, LINES[4])]


def test_search_ignores_unterminated_last_line(tmp_path):
    path = tmp_path / "partial.txt"
    path.write_text("one\ntwo", encoding="utf-8")
    assert search_all(path, "two") == []


def test_count_occurrences_matches_search_all(sample):
    assert count_occurrences(sample, "beta") == len(search_all(sample, "beta"))


def test_count_occurrences_counts_overlaps(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("aaa\n", encoding="utf-8")
    assert count_occurrences(path, "aa") == 2


def test_empty_pattern_rejected(sample):
    with pytest.raises(ValueError):
        count_occurrences(sample, "")


def test_search_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        search_first(tmp_path / "missing.txt", "x")


def test_typeline_all(sample):
    assert typeline(sample, "a") == "".join(LINES)


def test_typeline_first_lines(sample):
    assert typeline(sample, "+2") == "".join(LINES[:2])


def test_typeline_last_lines(sample):
    assert typeline(sample, "-2") == "".join(LINES[-2:])


def test_typeline_more_than_available(sample):
    assert typeline(sample, str(len(LINES) + 3)) == "".join(LINES)
    assert typeline(sample, f"-{len(LINES) + 3}") == "".join(LINES)


def test_typeline_first_and_last_cover_file(sample):
    assert typeline(sample, "+3") + typeline(sample, "-2") == typeline(sample, "a")


def test_typeline_invalid_option(sample):
    with pytest.raises(ValueError):
        typeline(sample, "x")


def test_count_characters_is_byte_length(sample):
    assert count(sample, "c") == len(sample.read_bytes())


def test_count_lines(sample):
    assert count(sample, "l") == len(LINES)


def test_count_words_spaces_plus_newlines(tmp_path):
    path = tmp_path / "w.txt"
    path.write_text("a b\nc\n", encoding="utf-8")
    assert count(path, "w") == 3


def test_count_invalid_option(sample):
    with pytest.raises(ValueError):
        count(sample, "z")


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_list_files(tree):
    assert list_dir(tree, "f") == ["a.txt", "b.txt"]


def test_list_counts_include_dot_entries(tree):
    assert list_dir(tree, "n") == (3, 2)


def test_list_inodes(tree):
    assert list_dir(tree, "i") == [
        (name, os.stat(tree / name).st_ino) for name in ("a.txt", "b.txt")
    ]


def test_list_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_dir(tmp_path / "nope", "f")


def test_run_command_search_count(sample):
    out = io.StringIO()
    assert run_command(f"search c beta {sample}\n", out) == 0
    assert out.getvalue() == "Total No.of Occurrences = 3\n"


def test_run_command_search_first(sample):
    out = io.StringIO()
    run_command(f"search f beta {sample}", out)
    assert out.getvalue() == "2: " + LINES[1]


def test_run_command_count_lines(sample):
    out = io.StringIO()
    run_command(f"count l {sample}", out)
    assert out.getvalue() == f"No.of lines:{len(LINES)}\n"


def test_run_command_typeline(sample):
    out = io.StringIO()
    run_command(f"typeline +1 {sample}", out)
    assert out.getvalue() == LINES[0]


def test_run_command_list_count(tree):
    out = io.StringIO()
    run_command(f"list n {tree}", out)
    assert out.getvalue() == "3 Dir(s)\t2 File(s)\n"


def test_run_command_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    out = io.StringIO()
    run_command(f"count c {missing}", out)
    assert out.getvalue() == f"File {missing} not found.\n"


def test_run_command_missing_dir(tmp_path):
    missing = tmp_path / "gone"
    out = io.StringIO()
    run_command(f"list f {missing}", out)
    assert out.getvalue() == f"Dir {missing} not found.\n"


def test_run_command_usage_on_missing_arguments():
    out = io.StringIO()
    assert run_command("count c", out) == 1
    assert out.getvalue().startswith("Usage: count")


def test_run_command_bad_command():
    out = io.StringIO()
    assert run_command("no-such-command-for-this-shell", out) == 127
    assert out.getvalue() == "Bad command.\n"


def test_run_command_external_program():
    out = io.StringIO()
    status = run_command(f"{sys.executable} -c print(42)", out)
    assert status == 0
    assert out.getvalue().strip() == "42"


def test_run_command_blank_line():
    out = io.StringIO()
    assert run_command("   \n", out) == 0
    assert out.getvalue() == ""


def test_main_runs_builtins_until_eof(sample, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"count l {sample}\n"))
    assert main([]) == 0
    assert f"No.of lines:{len(LINES)}" in capsys.readouterr().out