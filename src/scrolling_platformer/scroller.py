"""Upward scrolling.

While the player is above the threshold line, every entity moves down by a
fixed amount each tick, which keeps the player near the middle of the
screen and reads as climbing.
"""

from .world import WorldState


def should_scroll(state: WorldState, threshold: float = 0.5) -> bool:
    """Whether the living player is above ``threshold * height``."""
    return state.player.is_alive and state.player.y < state.height * threshold


def shift_world(state: WorldState, amount: float) -> None:
    """Add ``amount`` to the y of every entity, player included."""
    for platform in state.platforms:
        platform.y += amount
    for obstacle in state.obstacles:
        obstacle.y += amount
    for power_up in state.power_ups:
        power_up.y += amount
    state.player.y += amount
    state.scroll_offset += amount


def scroll(state: WorldState, amount: float = 5.0, threshold: float = 0.5) -> bool:
    """Shift the world once if the player is above the threshold.

    Returns:
        True if the world was shifted.
    """
    if not should_scroll(state, threshold):
        return False
    shift_world(state, amount)
    return True
