"""Tests for the GameSession state machine."""

from __future__ import annotations

import pytest

from trivia_app.core.errors import InvalidTransitionError
from trivia_app.core.models import ResolutionOutcome, SessionPhase
from trivia_app.core.services.game_session import GameSession
from trivia_app.core.services.quiz_deck import QuizDeck


def _answer_for(session: GameSession, answers: dict[str, str]) -> str:
    return answers[session.get_current_question().prompt]


def test_initial_state():
    session = GameSession()
    assert session.phase is SessionPhase.NOT_STARTED
    assert session.total_score == 0
    assert session.get_current_question() is None
    assert session.snapshot().question_count == 0


def test_start_enters_first_question(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    assert session.phase is SessionPhase.IN_QUESTION
    assert session.current_index == 0
    assert session.time_remaining == 30
    assert session.total_score == 0
    assert session.get_current_question() is two_question_deck.at(0)
    assert sorted(session.get_display_options()) == sorted(two_question_deck.at(0).options)


def test_scenario_correct_then_wrong(two_question_deck, paris_question, gold_question):
    answers = {paris_question.prompt: "paris", gold_question.prompt: "Fe"}
    session = GameSession()
    session.start(two_question_deck)

    first_is_paris = session.get_current_question() is paris_question
    first = session.answer(_answer_for(session, answers))
    assert session.phase is SessionPhase.RESOLVED
    if first_is_paris:
        assert first.outcome is ResolutionOutcome.CORRECT
        assert session.total_score == 100
    else:
        assert first.outcome is ResolutionOutcome.WRONG
        assert session.total_score == 0

    assert session.advance() is SessionPhase.IN_QUESTION
    assert session.time_remaining == 30
    session.answer(_answer_for(session, answers))
    assert session.advance() is SessionPhase.FINISHED

    summary = session.summary
    assert summary is not None
    assert summary.total_score == 100
    assert summary.question_count == 2
    assert summary.accuracy_percentage == 50.0
    assert summary.grade == "Keep practicing"
    rows = {row.category: row.percentage for row in summary.category_breakdown}
    assert rows == {"Geography": 100.0, "Science": 0.0}


def test_resolution_exposes_correct_answer(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    question = session.get_current_question()
    resolution = session.answer("definitely wrong")
    assert resolution.outcome is ResolutionOutcome.WRONG
    assert resolution.correct_answer == question.correct_answer
    assert resolution.submitted_answer == "definitely wrong"
    assert resolution.points_awarded == 0
    assert session.snapshot().resolution == resolution


def test_scenario_timeout_single_question(paris_question):
    session = GameSession()
    session.start(QuizDeck([paris_question]))
    for remaining in range(29, 0, -1):
        assert session.tick() is True
        assert session.phase is SessionPhase.IN_QUESTION
        assert session.time_remaining == remaining

    assert session.tick() is True
    assert session.phase is SessionPhase.RESOLVED
    assert session.time_remaining == 0
    assert session.total_score == 0
    resolution = session.resolution
    assert resolution.outcome is ResolutionOutcome.TIMEOUT
    assert resolution.timed_out
    assert resolution.submitted_answer is None
    assert paris_question.answered

    assert session.advance() is SessionPhase.FINISHED
    assert session.summary.total_score == 0


def test_stale_tick_after_resolution_changes_nothing(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    session.tick()
    session.answer(session.get_current_question().correct_answer)
    remaining = session.time_remaining
    score = session.total_score

    assert session.tick() is False
    assert session.time_remaining == remaining
    assert session.total_score == score
    assert session.phase is SessionPhase.RESOLVED


def test_tick_after_finish_is_ignored(paris_question):
    session = GameSession()
    session.start(QuizDeck([paris_question]))
    session.answer("Paris")
    session.advance()
    assert session.tick() is False
    assert session.phase is SessionPhase.FINISHED
    assert session.total_score == 100


def test_tick_before_start_rejected():
    with pytest.raises(InvalidTransitionError):
        GameSession().tick()


def test_entering_a_question_without_deck_rejected():
    session = GameSession()
    with pytest.raises(InvalidTransitionError) as excinfo:
        session._enter_question(0)
    assert excinfo.value.event == "enter_question"
    assert session.phase is SessionPhase.NOT_STARTED


def test_answer_after_finish_rejected(paris_question):
    session = GameSession()
    session.start(QuizDeck([paris_question]))
    session.answer("Paris")
    session.advance()
    with pytest.raises(InvalidTransitionError) as excinfo:
        session.answer("Paris")
    assert excinfo.value.event == "answer"
    assert excinfo.value.phase is SessionPhase.FINISHED


def test_answer_twice_rejected(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    session.answer("London")
    with pytest.raises(InvalidTransitionError):
        session.answer("Paris")
    assert session.total_score in (0, 100)


@pytest.mark.parametrize("event", ["answer", "advance", "replay"])
def test_events_rejected_before_start(event):
    session = GameSession()
    args = ("Paris",) if event == "answer" else ()
    with pytest.raises(InvalidTransitionError):
        getattr(session, event)(*args)


def test_advance_requires_resolution(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    with pytest.raises(InvalidTransitionError):
        session.advance()


def test_replay_resets_state(mixed_questions):
    session = GameSession()
    deck = QuizDeck(mixed_questions)
    session.start(deck)
    while session.phase is not SessionPhase.FINISHED:
        session.answer(session.get_current_question().correct_answer)
        session.advance()
    assert session.total_score == 1100

    session.replay()
    assert session.phase is SessionPhase.IN_QUESTION
    assert session.total_score == 0
    assert session.current_index == 0
    assert session.time_remaining == 30
    assert session.summary is None
    assert not any(question.answered for question in deck)


def test_replay_reshuffles(mixed_questions):
    session = GameSession()
    session.set_shuffle_seed(99)
    deck = QuizDeck(mixed_questions)
    session.start(deck)
    orders = set()
    for _ in range(40):
        orders.add(tuple(id(q) for q in deck.questions()))
        session.replay()
    assert len(orders) > 1


def test_seeded_sessions_are_reproducible(mixed_questions):
    first = GameSession()
    first.set_shuffle_seed(5)
    first.start(QuizDeck(list(mixed_questions)))
    first_order = [q.prompt for q in first.deck.questions()]
    first_options = first.get_display_options()

    second = GameSession()
    second.set_shuffle_seed(5)
    second.start(QuizDeck(list(mixed_questions)))
    assert [q.prompt for q in second.deck.questions()] == first_order
    assert second.get_display_options() == first_options


def test_total_score_matches_correct_resolutions(mixed_questions):
    session = GameSession(question_time_budget=3)
    deck = QuizDeck(mixed_questions)
    session.start(deck)
    expected = 0
    turn = 0
    while session.phase is not SessionPhase.FINISHED:
        question = session.get_current_question()
        if turn % 3 == 0:
            session.answer(question.correct_answer.upper())
            expected += question.point_value
        elif turn % 3 == 1:
            session.answer("wrong")
        else:
            while session.phase is SessionPhase.IN_QUESTION:
                session.tick()
        assert session.total_score == expected
        assert session.total_score <= deck.total_points()
        session.advance()
        turn += 1
    assert session.summary.total_score == expected


def test_normal_play_never_leaves_deck(mixed_questions):
    session = GameSession()
    session.start(QuizDeck(mixed_questions))
    seen = []
    while session.phase is not SessionPhase.FINISHED:
        seen.append(session.current_index)
        session.answer("wrong")
        session.advance()
    assert seen == [0, 1, 2, 3]
    assert session.get_current_question() is not None


def test_time_budget_change_applies_to_next_question(two_question_deck):
    session = GameSession(question_time_budget=10)
    session.start(two_question_deck)
    session.set_question_time_budget(15)
    assert session.time_remaining == 10
    session.answer("x")
    session.advance()
    assert session.time_remaining == 15


@pytest.mark.parametrize("budget", [0, -5, 2.5, True])
def test_invalid_time_budget(budget):
    with pytest.raises(ValueError):
        GameSession(question_time_budget=budget)


def test_snapshot_in_question(two_question_deck):
    session = GameSession()
    session.start(two_question_deck)
    snapshot = session.snapshot()
    question = session.get_current_question()
    assert snapshot.phase is SessionPhase.IN_QUESTION
    assert snapshot.question_number == 1
    assert snapshot.question_count == 2
    assert snapshot.prompt == question.prompt
    assert snapshot.category == question.category
    assert snapshot.difficulty is question.difficulty
    assert snapshot.point_value == question.point_value
    assert snapshot.time_remaining == 30
    assert snapshot.time_budget == 30
    assert snapshot.resolution is None
    assert snapshot.summary is None
