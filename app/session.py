from __future__ import annotations

from dataclasses import dataclass, field

from config import CORRECT_THRESHOLD
from deck import Sentence
from log import get_logger
from scoring import calculate_similarity, is_correct

logger = get_logger("session")


@dataclass(frozen=True)
class AttemptResult:
    transcript: str
    similarity: int
    is_correct: bool


@dataclass
class PracticeSession:
    """
    Walks through a deck one sentence at a time.

    Kept in st.session_state between reruns. The "saved only" view
    narrows navigation to expressions the user bookmarked.
    """

    sentences: list[Sentence]
    threshold: int = CORRECT_THRESHOLD
    index: int = 0
    saved: list[Sentence] = field(default_factory=list)
    show_saved_only: bool = False
    result: AttemptResult | None = None

    def __post_init__(self) -> None:
        if not self.sentences:
            raise ValueError("A practice session needs at least one sentence.")

    @property
    def display_sentences(self) -> list[Sentence]:
        return self.saved if self.show_saved_only else self.sentences

    @property
    def current(self) -> Sentence:
        return self.display_sentences[self.index]

    @property
    def position(self) -> int:
        return self.index + 1

    @property
    def total(self) -> int:
        return len(self.display_sentences)

    @property
    def progress_percent(self) -> float:
        return self.position / self.total * 100

    @property
    def is_last(self) -> bool:
        return self.index >= self.total - 1

    def grade(self, transcript: str) -> AttemptResult:
        """Score *transcript* against the current sentence's English text."""
        similarity = calculate_similarity(self.current.english, transcript)
        self.result = AttemptResult(
            transcript=transcript,
            similarity=similarity,
            is_correct=is_correct(similarity, self.threshold),
        )
        logger.debug(
            "Graded sentence %d: %d%% (%s)",
            self.current.number,
            similarity,
            "correct" if self.result.is_correct else "incorrect",
        )
        return self.result

    def next_sentence(self) -> bool:
        """Advance to the next sentence; False when already on the last one."""
        if self.is_last:
            return False
        self.index += 1
        self.result = None
        return True

    def save_current(self) -> bool:
        """Bookmark the current sentence; False if it was already saved."""
        sentence = self.current
        if sentence in self.saved:
            return False
        self.saved.append(sentence)
        return True

    def toggle_saved_view(self) -> bool:
        """
        Switch between the full deck and saved expressions.

        The saved view needs at least one saved expression; returns the
        new value of show_saved_only.
        """
        if not self.show_saved_only and not self.saved:
            return False
        self.show_saved_only = not self.show_saved_only
        self.index = 0
        self.result = None
        return self.show_saved_only
