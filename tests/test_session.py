import pytest

from notecards.config_models import SchedulerConfig
from notecards.review import InMemoryMetadataStore, NoActiveSessionError, ReviewSessionManager
from notecards.scheduling import ConfidenceRating, MasteryLevel, PracticeMode, initialize_metadata

from .conftest import NOW


@pytest.fixture
def store():
    return InMemoryMetadataStore()


@pytest.fixture
def manager(store, scheduler_config):
    return ReviewSessionManager(store, scheduler_config)


def test_review_of_unseen_card_initializes_and_persists(manager, store):
    manager.start_session("deck", now=NOW)
    updated = manager.record_review("c1", ConfidenceRating.GOOD, 500, now=NOW)

    assert store.get("c1") == updated
    assert updated.mastery_level is MasteryLevel.LEARNING
    session = manager.current_session
    assert (session.cards_reviewed, session.new_cards, session.correct_count) == (1, 1, 1)


def test_known_card_is_not_counted_as_new(store, scheduler_config):
    store.set(initialize_metadata("known", now=NOW))
    manager = ReviewSessionManager(store, scheduler_config)
    manager.start_session("deck", now=NOW)
    manager.record_review("known", ConfidenceRating.HARD, now=NOW)

    assert manager.current_session.new_cards == 0
    assert manager.current_session.cards_reviewed == 1


def test_again_reviews_are_tracked_once_per_card(manager):
    manager.start_session("deck", now=NOW)
    manager.record_review("a", ConfidenceRating.AGAIN, now=NOW)
    manager.record_review("a", ConfidenceRating.AGAIN, now=NOW + 1)
    manager.record_review("b", ConfidenceRating.EASY, now=NOW + 2)

    session = manager.current_session
    assert session.again_count == 2
    assert session.again_card_ids == ["a"]
    assert session.correct_count == 1
    assert session.new_cards == 2


def test_review_without_session_raises(manager, store):
    with pytest.raises(NoActiveSessionError):
        manager.record_review("x", ConfidenceRating.GOOD, now=NOW)
    assert "x" not in store


def test_end_session_finalizes(manager):
    manager.start_session("deck", now=NOW)
    manager.record_review("a", ConfidenceRating.GOOD, now=NOW)
    session = manager.end_session(now=NOW + 120_000)

    assert session.end_time == NOW + 120_000
    assert session.duration_ms == 120_000
    assert manager.current_session is None
    with pytest.raises(NoActiveSessionError):
        manager.end_session(now=NOW)


def test_starting_a_session_ends_the_active_one(manager):
    manager.start_session("first", now=NOW)
    manager.record_review("a", ConfidenceRating.GOOD, now=NOW)
    second = manager.start_session("second", now=NOW + 10)

    assert second.deck_id == "second"
    assert second.cards_reviewed == 0
    assert manager.current_session.deck_id == "second"


def test_cancel_session(manager):
    manager.start_session("deck", now=NOW)
    manager.cancel_session()
    assert manager.current_session is None


def test_practice_mode_flows_into_history(manager):
    manager.start_session("deck", practice_mode="type-answer", now=NOW)
    updated = manager.record_review("a", ConfidenceRating.GOOD, 900, now=NOW)

    assert manager.current_session.practice_mode is PracticeMode.TYPE_ANSWER
    assert updated.review_history[-1].mode is PracticeMode.TYPE_ANSWER
    assert updated.review_history[-1].time_spent == 900


def test_current_session_is_a_copy(manager):
    manager.start_session("deck", now=NOW)
    snapshot = manager.current_session
    snapshot.cards_reviewed = 99
    snapshot.again_card_ids.append("zzz")

    assert manager.current_session.cards_reviewed == 0
    assert manager.current_session.again_card_ids == []


def test_new_cards_use_configured_default_ease(store):
    manager = ReviewSessionManager(store, SchedulerConfig(default_ease_factor=2.0))
    manager.start_session("deck", now=NOW)
    manager.record_review("a", ConfidenceRating.GOOD, now=NOW)
    manager.record_review("a", ConfidenceRating.GOOD, now=NOW + 1)

    # second GOOD: 1.0 * 2.0
    assert store.get("a").interval == pytest.approx(2.0)


def test_invalid_rating_does_not_touch_session(manager, store):
    manager.start_session("deck", now=NOW)
    with pytest.raises(ValueError):
        manager.record_review("a", 7, now=NOW)

    assert manager.current_session.cards_reviewed == 0
    assert len(store) == 0


def test_store_get_many_skips_unknown_ids(store):
    store.set(initialize_metadata("a", now=NOW))
    store.set(initialize_metadata("b", now=NOW))
    store.delete("b")

    assert list(store.get_many(["a", "b", "c"])) == ["a"]
