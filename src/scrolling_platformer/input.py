"""Per-tick input snapshots derived from a key-state map.

The host fills a ``{key_code: held}`` map from pygame KEYDOWN/KEYUP events
between ticks. At the start of each tick KeyState reads that map once and
turns the jump key into press/release edges by comparing with the
previous tick, so a single key press is handled exactly once.
"""

from dataclasses import dataclass
from typing import Mapping

import pygame


@dataclass(frozen=True)
class InputSnapshot:
    """Input as seen by one simulation tick."""
    left: bool = False
    right: bool = False
    jump_held: bool = False
    jump_pressed: bool = False  # Went down since the previous tick
    jump_released: bool = False  # Went up since the previous tick


NO_INPUT = InputSnapshot()


class KeyState:
    """Edge detector for the jump key plus polled directional keys.

    Unknown key codes are ignored; keys absent from the map count as not
    held.
    """

    def __init__(
        self,
        jump_key: int = pygame.K_SPACE,
        left_key: int = pygame.K_LEFT,
        right_key: int = pygame.K_RIGHT,
    ):
        self.jump_key = jump_key
        self.left_key = left_key
        self.right_key = right_key
        self._jump_was_held = False

    def capture(self, keys: Mapping[int, bool]) -> InputSnapshot:
        """Snapshot a live key map for this tick."""
        return self.capture_buttons(
            left=bool(keys.get(self.left_key, False)),
            right=bool(keys.get(self.right_key, False)),
            jump=bool(keys.get(self.jump_key, False)),
        )

    def capture_buttons(self, left: bool, right: bool, jump: bool) -> InputSnapshot:
        """Snapshot from already-decoded button states (agents, tests)."""
        snapshot = InputSnapshot(
            left=left,
            right=right,
            jump_held=jump,
            jump_pressed=jump and not self._jump_was_held,
            jump_released=self._jump_was_held and not jump,
        )
        self._jump_was_held = jump
        return snapshot

    def reset(self) -> None:
        self._jump_was_held = False
