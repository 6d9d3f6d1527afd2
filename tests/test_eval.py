import pytest

from tictac import (
    InvalidArgumentError,
    eval_self_play,
    eval_vs_random,
    outcome_rates,
    play_records,
    results_frame,
    summarize,
)


def test_eval_vs_random_rates():
    w, d, l = eval_vs_random(games=30, seed=0, progress=False)
    assert w + d + l == pytest.approx(1.0)
    assert all(0.0 <= x <= 1.0 for x in (w, d, l))


def test_play_records_reproducible():
    a = play_records(games=10, seed=7, progress=False)
    b = play_records(games=10, seed=7, progress=False)
    assert a == b


def test_play_records_alternate_first_mover():
    records = play_records(games=6, seed=1, progress=False)
    assert [r["ai_first"] for r in records] == [True, False] * 3
    for r in records:
        assert 5 <= r["moves"] <= 9
        assert r["outcome"] in ("win", "draw", "loss")
        if r["outcome"] == "draw":
            assert r["winner"] is None and r["moves"] == 9


def test_eval_self_play():
    stats = eval_self_play(games=20, seed=3, progress=False)
    assert stats["games"] == 20
    assert stats["first_w"] + stats["second_w"] + stats["draw"] == pytest.approx(1.0)
    assert 5 <= stats["mean_moves"] <= 9


def test_results_frame():
    records = play_records(games=4, seed=0, progress=False)
    df = results_frame(records)
    assert list(df.columns) == ["game", "ai_first", "winner", "outcome", "moves"]
    assert len(df) == 4
    assert df["game"].tolist() == [0, 1, 2, 3]


def test_larger_board():
    records = play_records(games=4, size=4, seed=0, progress=False)
    assert all(7 <= r["moves"] <= 16 for r in records)


def test_unknown_opponent():
    with pytest.raises(InvalidArgumentError):
        play_records(games=1, opponent="minimax", progress=False)


def test_summarize_matches_eval_vs_random():
    records = play_records(games=12, seed=5, progress=False)
    s = summarize(records)
    assert s["games"] == 12
    assert (s["w"], s["d"], s["l"]) == eval_vs_random(games=12, seed=5, progress=False)
    assert s["mean_moves"] == pytest.approx(sum(r["moves"] for r in records) / 12)


def test_outcome_rates_by_hand():
    records = [
        {"outcome": "win", "moves": 5},
        {"outcome": "win", "moves": 7},
        {"outcome": "draw", "moves": 9},
        {"outcome": "loss", "moves": 6},
    ]
    assert outcome_rates(records) == (0.5, 0.25, 0.25)
    assert summarize(records)["mean_moves"] == pytest.approx(6.75)
