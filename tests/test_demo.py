import io
import random

import pytest

from adjgraph.demo import ROUND_ONE_IDS, main, run_demo


def _transcript(seed):
    out = io.StringIO()
    run_demo(random.Random(seed), out)
    return out.getvalue()


def _round_one(text):
    return text.split("Creating a large graph")[0]


@pytest.mark.parametrize("seed", [0, 1, 2, 7, 42])
def test_same_seed_same_transcript(seed):
    first = io.StringIO()
    run_demo(random.Random(seed), first)
    second = io.StringIO()
    run_demo(random.Random(seed), second)
    first_text = first.getvalue()
    assert first_text == second.getvalue()
    assert first_text.startswith("Testing graph...\n")
    assert first_text.count("Filling graph") == 2


@pytest.mark.parametrize("seed", [0, 1, 2, 7, 42])
def test_empty_graph_section(seed):
    text = _transcript(seed)
    assert text.count("Trying to remove edge on empty graph...Failed to remove edge") == 2
    assert text.count("No edge between vertices\n") == 2
    assert text.count("Testing graph...") == 2


@pytest.mark.parametrize("seed", [0, 3, 11, 99])
def test_bad_data_always_rejected(seed):
    text = _round_one(_transcript(seed))
    assert "Adding known duplicate...Failed\n" in text
    assert "Adding vertex connected to nonexistent vertex...Failed\n" in text
    assert "Adding vertex with invalid data...Failed\n" in text
    assert "Adding between non existent vertices...failed\n" in text
    assert "Adding edge with invalid data...failed\n" in text


@pytest.mark.parametrize("seed", [0, 5, 13])
def test_round_one_adds_only_known_ids_once(seed):
    text = _round_one(_transcript(seed))
    added = [
        int(line.split()[-1])
        for line in text.splitlines()
        if line.startswith("Added vertex ")
    ]
    assert added
    assert len(added) == len(set(added))
    assert set(added) <= set(ROUND_ONE_IDS)


@pytest.mark.parametrize("seed", [0, 5, 13])
def test_bfs_visits_each_vertex_once(seed):
    text = _round_one(_transcript(seed))
    visited = [int(line.split()[-1]) for line in text.splitlines() if line.startswith("Visited: ")]
    assert visited
    assert len(visited) == len(set(visited))


@pytest.mark.parametrize("seed", [0, 1, 8])
def test_transcript_ends_cleared(seed):
    text = _transcript(seed)
    assert text.endswith("Clearing graph...\nGraph is empty\n")
    assert text.count("Clearing graph...\nGraph is empty\n") == 2


def test_main_matches_run_demo(capsys):
    assert main(["--seed", "4"]) == 0
    assert capsys.readouterr().out == _transcript(4)


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit):
        main(["--seed", "not-a-number"])