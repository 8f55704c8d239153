"""Sampling and size policy for the insights path."""

import random
from typing import Optional, Protocol

from slack_bridge.config import InsightsConfig


class RandomSource(Protocol):
    def random(self) -> float: ...


def clamp_length(text: str, max_length: int) -> str:
    """Truncate to at most ``max_length`` characters (applied before sanitizing)."""
    if max_length <= 0:
        return ""
    return text[:max_length]


class SamplingPolicy:
    """Decides per message whether analysis runs, and bounds text size."""

    def __init__(
        self,
        sample_rate: float,
        max_text_length: int,
        min_text_length: int,
        rng: Optional[RandomSource] = None,
    ):
        self.sample_rate = sample_rate
        self.max_text_length = max_text_length
        self.min_text_length = min_text_length
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: InsightsConfig, rng: Optional[RandomSource] = None) -> "SamplingPolicy":
        return cls(
            sample_rate=config.sample_rate,
            max_text_length=config.max_text_length,
            min_text_length=config.min_text_length,
            rng=rng,
        )

    def should_process(self, message=None) -> bool:
        """One uniform draw per message; a rate of 0 never draws and never processes."""
        if self.sample_rate <= 0:
            return False
        return self._rng.random() <= self.sample_rate

    def clamp_length(self, text: str) -> str:
        return clamp_length(text, self.max_text_length)

    def is_long_enough(self, sanitized_text: str) -> bool:
        return len(sanitized_text) >= self.min_text_length
