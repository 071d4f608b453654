"""Tests for the session module."""

import pytest

from deck import Sentence
from session import AttemptResult, PracticeSession


@pytest.fixture()
def session(sentences: list[Sentence]) -> PracticeSession:
    return PracticeSession(sentences, threshold=70)


class TestNavigation:
    def test_starts_at_first_sentence(self, session: PracticeSession):
        assert session.current.number == 1
        assert session.position == 1
        assert session.total == 3
        assert session.is_last is False

    def test_progress_percent(self, session: PracticeSession):
        assert session.progress_percent == pytest.approx(100 / 3)
        session.next_sentence()
        session.next_sentence()
        assert session.progress_percent == 100

    def test_next_clears_result(self, session: PracticeSession):
        session.grade("I went to the beach")
        assert session.next_sentence() is True
        assert session.current.number == 2
        assert session.result is None

    def test_next_stops_at_last(self, session: PracticeSession):
        session.next_sentence()
        session.next_sentence()
        assert session.is_last is True
        assert session.next_sentence() is False
        assert session.current.number == 3

    def test_empty_deck_rejected(self):
        with pytest.raises(ValueError):
            PracticeSession([])


class TestGrade:
    def test_exact_answer(self, session: PracticeSession):
        result = session.grade("i went to the beach")
        assert result == AttemptResult("i went to the beach", 100, True)
        assert session.result is result

    def test_close_answer_is_correct(self, session: PracticeSession):
        result = session.grade("I went to beach")
        assert result.similarity == 79
        assert result.is_correct is True

    def test_wrong_answer(self, session: PracticeSession):
        result = session.grade("I like pizza")
        assert result.similarity < 70
        assert result.is_correct is False

    def test_threshold_is_configurable(self, sentences: list[Sentence]):
        strict = PracticeSession(sentences, threshold=90)
        assert strict.grade("I went to beach").is_correct is False


class TestSavedExpressions:
    def test_save_current(self, session: PracticeSession):
        assert session.save_current() is True
        assert session.saved == [session.current]

    def test_save_twice(self, session: PracticeSession):
        session.save_current()
        assert session.save_current() is False
        assert len(session.saved) == 1

    def test_same_number_different_sentences(self):
        # a non-numeric 순번 falls back to the row position and can repeat
        session = PracticeSession(
            [Sentence(1, "하나", "one"), Sentence(1, "둘", "two")]
        )
        assert session.save_current() is True
        session.next_sentence()
        assert session.save_current() is True
        assert [s.english for s in session.saved] == ["one", "two"]

    def test_toggle_needs_saved(self, session: PracticeSession):
        assert session.toggle_saved_view() is False
        assert session.show_saved_only is False

    def test_toggle_switches_view(self, session: PracticeSession):
        session.next_sentence()
        session.save_current()
        session.grade("The weather is nice")

        assert session.toggle_saved_view() is True
        assert session.index == 0
        assert session.result is None
        assert session.total == 1
        assert session.current.number == 2
        assert session.is_last is True

        assert session.toggle_saved_view() is False
        assert session.total == 3
        assert session.current.number == 1
