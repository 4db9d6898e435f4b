import json

import pytest

from notecards.__main__ import main, parse_ratings, run_schedule
from notecards.config_models import RunConfig
from notecards.scheduling import ConfidenceRating

from .conftest import NOW


def test_parse_ratings_accepts_names_and_digits():
    assert parse_ratings("again, Good,3,,1") == [
        ConfidenceRating.AGAIN,
        ConfidenceRating.GOOD,
        ConfidenceRating.EASY,
        ConfidenceRating.HARD,
    ]


@pytest.mark.parametrize("raw", ["great", "4", "-1"])
def test_parse_ratings_rejects_unknown(raw):
    with pytest.raises(SystemExit):
        parse_ratings(raw)


def test_run_schedule_advances_to_each_due_date():
    steps = run_schedule("fc-x", [ConfidenceRating.GOOD, ConfidenceRating.GOOD], RunConfig(), now=NOW)

    assert [s["interval"] for s in steps] == [1.0, 2.5]
    assert steps[0]["last_reviewed"] == NOW
    assert steps[1]["last_reviewed"] == steps[0]["due_date"]
    assert all("review_history" not in s for s in steps)
    assert steps[-1]["mastery_level"] == "learning"


def test_main_parse_prints_cards(tmp_path, capsys, restore_notecards_logger):
    note = tmp_path / "note.md"
    note.write_text("**Flashcard:** Q :: A<!--fc-id:n1-->\n", encoding="utf-8")

    main(["--command", "parse", "--note", str(note), "--log-level", "ERROR"])
    cards = json.loads(capsys.readouterr().out)

    assert [(c["id"], c["front"], c["back"]) for c in cards] == [("n1", "Q", "A")]
    assert cards[0]["source_file"] == str(note)


def test_main_schedule_prints_steps(capsys, restore_notecards_logger):
    main(["--command", "schedule", "--card-id", "demo", "--ratings", "good,again", "--log-level", "ERROR"])
    steps = json.loads(capsys.readouterr().out)

    assert [s["id"] for s in steps] == ["demo", "demo"]
    assert [s["interval"] for s in steps] == [1.0, 1.0]
    assert steps[1]["consecutive_successes"] == 0


def test_main_parse_requires_note(restore_notecards_logger):
    with pytest.raises(SystemExit):
        main(["--command", "parse", "--log-level", "ERROR"])


def test_main_missing_note_file(tmp_path, restore_notecards_logger):
    with pytest.raises(SystemExit):
        main(["--command", "parse", "--note", str(tmp_path / "absent.md"), "--log-level", "ERROR"])
