from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_engine.game import Command, GameConfig, GameSession, UniformRandomizer, count_holes, max_height
from tetris_engine.visualization.palette import render_rgb


class TetrisEnv(gym.Env):
    """Falling-block game as a gymnasium environment.

    Actions (5 total):
      0: Move Left
      1: Move Right
      2: Soft Drop
      3: Rotate
      4: No-op

    Each step applies the action, then advances the session by one tick.
    Observation is the board with the falling piece painted in, plus the
    next piece type. Reward is the score gained this step with optional
    shaping penalties on board features.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    ACT_NOOP = 4

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        reward_weights: Optional[Dict[str, float]] = None,
        terminal_penalty: float = 0.0,
        max_episode_steps: int = 10_000,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.randomizer = UniformRandomizer(self.config.random_seed)
        self.game = GameSession(self.config, randomizer=self.randomizer)
        self.render_mode = render_mode
        self.terminal_penalty = float(terminal_penalty)
        self.max_episode_steps = int(max_episode_steps)
        self.reward_weights: Dict[str, float] = {
            "score": 0.01,      # per point of engine score
            "holes": 0.0,       # penalize holes created
            "height": 0.0,      # penalize max height increase
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        h, w = self.config.height, self.config.width
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=0, high=7, shape=(h, w), dtype=np.int8),
                "next": spaces.Discrete(8),
            }
        )
        self.action_space = spaces.Discrete(5)
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        snap = self.game.snapshot()
        return {"grid": snap.overlay().astype(np.int8), "next": int(snap.next_kind)}

    def _get_info(self) -> Dict[str, Any]:
        snap = self.game.snapshot()
        return {"score": snap.score, "lines": snap.lines, "level": snap.level, "steps": self._steps}

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.randomizer.seed(seed)
        self.game = GameSession(self.config, randomizer=self.randomizer)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = int(action)
        if not self.action_space.contains(action):
            raise ValueError(f"invalid action {action}")

        before = self.game.snapshot().grid

        if action != self.ACT_NOOP:
            self.game.command(Command(action))
        result = self.game.tick()
        self._steps += 1

        reward_components: Dict[str, float] = {
            "score": self.reward_weights["score"] * float(result.score_delta),
        }
        if result.locked:
            after = self.game.snapshot().grid
            reward_components["holes"] = -self.reward_weights["holes"] * float(
                max(0, count_holes(after) - count_holes(before)))
            reward_components["height"] = -self.reward_weights["height"] * float(
                max(0, max_height(after) - max_height(before)))

        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        if terminated:
            reward_components["terminal"] = self.terminal_penalty
        reward = float(sum(reward_components.values()))

        info = self._get_info()
        info["reward_components"] = reward_components
        info["lines_cleared"] = result.lines_cleared
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            return render_rgb(self.game.snapshot().overlay())
        return None

    def close(self) -> None:
        pass
