import io

import pytest

from ossim.paging import PagingResult, fifo, format_result, lfu, lru, main, mfu

FIFO_STRING = [3, 4, 5, 6, 3, 4, 7, 3, 4, 5, 6, 7, 2, 4, 6]
LRU_STRING = [12, 15, 12, 18, 6, 8, 11, 12, 19, 12, 6, 8, 12, 15, 19, 8]


def test_fifo_fault_count_for_sample_string():
    assert fifo(FIFO_STRING, 3).faults == 11


def test_faults_match_snapshots():
    results = [
        fifo(FIFO_STRING, 3),
        lru(FIFO_STRING, 3),
        lfu(FIFO_STRING, 3),
        mfu(FIFO_STRING, 3),
    ]
    for result in results:
        assert result.faults == sum(s is not None for s in result.snapshots)
        assert len(result.snapshots) == len(FIFO_STRING)


def test_snapshot_holds_referenced_page():
    results = [
        fifo(LRU_STRING, 3),
        lru(LRU_STRING, 3),
        lfu(LRU_STRING, 3),
        mfu(LRU_STRING, 3),
    ]
    for result in results:
        for page, snapshot in zip(result.references, result.snapshots):
            if snapshot is not None:
                assert page in snapshot
                assert len(snapshot) == 3


def test_enough_frames_only_compulsory_faults():
    distinct = len(set(FIFO_STRING))
    assert fifo(FIFO_STRING, distinct).faults == distinct
    assert lru(FIFO_STRING, distinct).faults == distinct
    assert lfu(FIFO_STRING, distinct).faults == distinct
    assert mfu(FIFO_STRING, distinct).faults == distinct


def test_rejects_zero_frames():
    with pytest.raises(ValueError):
        fifo([1, 2], 0)
    with pytest.raises(ValueError):
        lru([1, 2], 0)
    with pytest.raises(ValueError):
        lfu([1, 2], 0)
    with pytest.raises(ValueError):
        mfu([1, 2], 0)


def test_mfu_evicts_most_used():
    result = mfu([1, 1, 2, 3], 2)
    assert result.snapshots[-1] == (3, 2)


def test_lfu_evicts_least_used():
    result = lfu([1, 1, 2, 3], 2)
    assert result.snapshots[-1] == (1, 3)


def test_format_result_layout():
    result = fifo(FIFO_STRING, 3)
    text = format_result(result)
    lines = text.splitlines()
    assert len(lines) == 3 + 3
    assert lines[1] == ""
    assert lines[-1] == f"Total Page Faults: {result.faults}"
    assert all(len(line) == 3 * len(FIFO_STRING) for line in lines[2:5])


def test_result_is_immutable():
    result = fifo([1], 1)
    assert isinstance(result, PagingResult)
    assert result.faults == 1
    assert result.snapshots[0] == (1,)
    with pytest.raises(AttributeError):
        result.frame_count = 2  # type: ignore[misc]
    assert result.faults == 1


def test_main_with_arguments(capsys):
    refs = ["3", "4", "5"]
    assert main(["fifo", "-n", "3", *refs]) == 0
    assert f"Total Page Faults: {len(refs)}" in capsys.readouterr().out


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n7\n7\n8\n"))
    assert main(["lru"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("Total Page Faults: 2")