"""Emotion Engine.

Mock keyword-table classifier: substring hits per category, a small random
jitter on every category, then normalization into a distribution.
"""
import random
from dataclasses import dataclass

from apps.core.config import settings

# Declared order doubles as the tie-break order for the primary emotion
EMOTIONS: tuple[str, ...] = ("happy", "sad", "angry", "fear", "surprise", "neutral")

EMOTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "happy": ("happy", "joy", "excited", "great", "amazing", "wonderful", "fantastic", "love", "glad", "pleased"),
    "sad": ("sad", "depressed", "unhappy", "disappointed", "upset", "down", "blue", "miserable"),
    "angry": ("angry", "mad", "furious", "hate", "annoyed", "frustrated", "irritated", "outraged"),
    "fear": ("afraid", "scared", "worried", "anxious", "nervous", "terrified", "frightened", "panic"),
    "surprise": ("surprised", "shocked", "amazed", "astonished", "stunned", "wow", "incredible"),
    "neutral": ("okay", "fine", "normal", "regular", "standard", "typical"),
}


@dataclass(frozen=True)
class EmotionScore:
    primary_emotion: str
    confidence: float
    emotions: dict[str, float]


def keyword_scores(
    text: str,
    base_neutral: float = 0.1,
    keyword_weight: float = 0.3,
) -> dict[str, float]:
    """Pre-jitter, pre-normalization scores for ``text``.

    Every keyword found as a substring of the lower-cased text adds
    ``keyword_weight`` to its category; hits are not capped.
    """
    text_lower = text.lower()
    scores = {emotion: 0.0 for emotion in EMOTIONS}
    scores["neutral"] = base_neutral
    for emotion, keywords in EMOTION_KEYWORDS.items():
        hits = sum(1 for kw in keywords if kw in text_lower)
        scores[emotion] += hits * keyword_weight
    return scores


def normalize(scores: dict[str, float]) -> dict[str, float]:
    total = sum(scores.values())
    return {emotion: score / total for emotion, score in scores.items()}


def primary_emotion(scores: dict[str, float]) -> str:
    """Highest-scoring label; exact ties go to the first in declared order."""
    return max(EMOTIONS, key=lambda emotion: scores[emotion])


class EmotionScorer:
    """Keyword scorer with injectable randomness.

    ``rng`` is anything with a ``random()`` method returning floats in
    [0, 1); pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        base_neutral: float | None = None,
        keyword_weight: float | None = None,
        jitter: float | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.base_neutral = settings.scorer.base_neutral if base_neutral is None else base_neutral
        self.keyword_weight = settings.scorer.keyword_weight if keyword_weight is None else keyword_weight
        self.jitter = settings.scorer.jitter if jitter is None else jitter

        # Neutral's base is what keeps the normalization total above zero
        if self.base_neutral <= 0:
            raise ValueError("base_neutral must be positive")
        if self.keyword_weight < 0 or self.jitter < 0:
            raise ValueError("keyword_weight and jitter must be non-negative")

    def analyze(self, text: str) -> EmotionScore:
        scores = keyword_scores(text, self.base_neutral, self.keyword_weight)
        for emotion in EMOTIONS:
            scores[emotion] += self.rng.random() * self.jitter

        emotions = normalize(scores)
        primary = primary_emotion(emotions)
        return EmotionScore(
            primary_emotion=primary,
            confidence=emotions[primary],
            emotions=emotions,
        )
