"""Tests for the sampling and size policy."""

from slack_bridge.config import InsightsConfig
from slack_bridge.domain.sampling import SamplingPolicy, clamp_length


class _FixedRng:
    def __init__(self, *values):
        self._values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self._values.pop(0)


class TestShouldProcess:
    def test_rate_one_always_processes(self):
        policy = SamplingPolicy(1.0, 1500, 20, rng=_FixedRng(0.999999))
        assert policy.should_process() is True

    def test_rate_zero_never_draws(self):
        rng = _FixedRng()
        policy = SamplingPolicy(0.0, 1500, 20, rng=rng)
        assert policy.should_process() is False
        assert rng.calls == 0

    def test_draw_compared_to_rate(self):
        rng = _FixedRng(0.2, 0.5, 0.7)
        policy = SamplingPolicy(0.5, 1500, 20, rng=rng)
        assert policy.should_process() is True
        assert policy.should_process() is True
        assert policy.should_process() is False
        assert rng.calls == 3

    def test_default_rng(self):
        policy = SamplingPolicy(1.0, 1500, 20)
        assert policy.should_process() is True


class TestLengths:
    def test_clamp_length(self):
        assert clamp_length("abcdef", 3) == "abc"
        assert clamp_length("abc", 10) == "abc"
        assert clamp_length("abc", 0) == ""

    def test_policy_clamp(self):
        policy = SamplingPolicy(1.0, 5, 0)
        assert policy.clamp_length("hello world") == "hello"

    def test_is_long_enough(self):
        policy = SamplingPolicy(1.0, 1500, 5)
        assert policy.is_long_enough("hello") is True
        assert policy.is_long_enough("hey") is False


class TestFromConfig:
    def test_copies_values(self):
        config = InsightsConfig(sample_rate=0.25, max_text_length=100, min_text_length=7)
        policy = SamplingPolicy.from_config(config)
        assert policy.sample_rate == 0.25
        assert policy.max_text_length == 100
        assert policy.min_text_length == 7
