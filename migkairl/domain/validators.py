import struct
from dataclasses import dataclass

from migkairl.domain.models import State
from migkairl.domain.ports import AnswerValidator


@dataclass(frozen=True)
class ExactAnswer(AnswerValidator):
    """Matches one answer, ignoring surrounding whitespace and case."""

    answer: str
    correct: State
    wrong: State

    def evaluate(self, text: str) -> State:
        if text.strip().lower() == self.answer.lower():
            return self.correct
        return self.wrong


@dataclass(frozen=True)
class KeywordAnswer(AnswerValidator):
    """Accepts any answer mentioning one of the keywords (case-insensitive)."""

    keywords: tuple[str, ...]
    correct: State
    wrong: State

    def evaluate(self, text: str) -> State:
        lowered = text.lower()
        if any(keyword.lower() in lowered for keyword in self.keywords):
            return self.correct
        return self.wrong


def _single(value: float) -> float:
    """Rounds to the nearest 32-bit float."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class NumericAnswer(AnswerValidator):
    """
    Parses the trimmed text as a single-precision number and compares it
    exactly. Only ASCII notation counts (no '_' separators, no non-Latin
    digits). Anything that fails to parse is a wrong answer, not an error.
    """

    expected: float
    correct: State
    wrong: State

    def evaluate(self, text: str) -> State:
        text = text.strip()
        if not text.isascii() or "_" in text:
            return self.wrong
        try:
            value = _single(float(text))
        except (ValueError, OverflowError):
            return self.wrong
        return self.correct if value == _single(self.expected) else self.wrong
