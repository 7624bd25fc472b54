from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, Union


@dataclass(frozen=True)
class PacingState:
    level: int
    interval: int  # milliseconds between ticks
    lines_total: int


@dataclass(frozen=True)
class LockOutcome:
    score_delta: int
    level: int
    interval: int
    lines_total: int


class ScoringPolicy(Protocol):
    initial_interval: int

    def on_lock(self, lines: int, state: PacingState, elapsed_ms: int) -> LockOutcome: ...


def _unchanged(state: PacingState) -> LockOutcome:
    return LockOutcome(0, state.level, state.interval, state.lines_total)


@dataclass
class FlatScoring:
    """Fixed reward per line; speed up every `lines_per_level` lines."""

    points_per_line: int = 100
    lines_per_level: int = 10
    initial_interval: int = 500
    interval_step: int = 50
    min_interval: int = 50

    def on_lock(self, lines: int, state: PacingState, elapsed_ms: int = 0) -> LockOutcome:
        if lines <= 0:
            return _unchanged(state)
        level, interval, total = state.level, state.interval, state.lines_total
        # Lines are counted one at a time so a multi-line clear that crosses a
        # level boundary still levels up.
        for _ in range(lines):
            total += 1
            if total % self.lines_per_level == 0:
                level += 1
                interval = max(self.min_interval, interval - self.interval_step)
        return LockOutcome(self.points_per_line * lines, level, interval, total)


@dataclass
class WeightedScoring:
    """Classic 100/300/500/800 table plus a bonus for placing pieces quickly.

    The bonus is `time_bonus_scale // elapsed_ms`, never below
    `min_time_bonus`. Every non-zero clear shortens the tick interval a
    little, down to `min_interval`.
    """

    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)
    time_bonus_scale: int = 100_000
    min_time_bonus: int = 10
    lines_per_level: int = 10
    initial_interval: int = 500
    interval_step: int = 10
    min_interval: int = 100

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        if 1 <= lines <= 4:
            return self.line_clear_scores[lines - 1]
        return self.line_clear_scores[-1] + (lines - 4) * 400

    def time_bonus(self, elapsed_ms: int) -> int:
        return max(self.min_time_bonus, self.time_bonus_scale // max(1, int(elapsed_ms)))

    def on_lock(self, lines: int, state: PacingState, elapsed_ms: int = 0) -> LockOutcome:
        if lines <= 0:
            return _unchanged(state)
        total = state.lines_total + lines
        level = 1 + total // self.lines_per_level
        interval = max(self.min_interval, state.interval - self.interval_step)
        delta = self.score_for_lines(lines) + self.time_bonus(elapsed_ms)
        return LockOutcome(delta, max(level, state.level), interval, total)


SCORING_POLICIES = {
    "flat": FlatScoring,
    "weighted": WeightedScoring,
}


def make_scoring(policy: Union[str, ScoringPolicy], initial_interval: int | None = None) -> ScoringPolicy:
    """Build a scoring policy by name, or reuse an existing one.

    A non-None `initial_interval` overrides the policy's own default in
    both cases.
    """
    if not isinstance(policy, str):
        if initial_interval is None or initial_interval == policy.initial_interval:
            return policy
        return replace(policy, initial_interval=initial_interval)
    try:
        cls = SCORING_POLICIES[policy]
    except KeyError:
        raise ValueError(f"unknown scoring policy {policy!r}; choose from {sorted(SCORING_POLICIES)}") from None
    if initial_interval is None:
        return cls()
    return cls(initial_interval=initial_interval)
