"""Axis-aligned collision tests.

Every test takes entities exposing x, y, width and height in screen
coordinates (y down). Comparisons are strict, so boxes that only share an
edge do not collide.
"""

from .entities import Player, Platform, PowerUp


def overlaps_box(a, b) -> bool:
    """Whether box ``a`` collides with box ``b``.

    Horizontally the spans must intersect. Vertically it is ``a``'s bottom
    edge that must lie strictly inside ``b``'s vertical span: a player whose
    feet are inside a platform lands on it, and a player resting exactly on
    top of something is not touching it.
    """
    a_bottom = a.y + a.height
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a_bottom < b.y + b.height
        and a_bottom > b.y
    )


def overlaps_pickup(player: Player, power_up: PowerUp) -> bool:
    """Pickup test against the power-up's square bounding box.

    Power-ups are drawn as circles but collected by box, using the same
    four tests as overlaps_box with side = size.
    """
    bottom = player.y + player.height
    return (
        player.x < power_up.x + power_up.size
        and player.x + player.width > power_up.x
        and bottom < power_up.y + power_up.size
        and bottom > power_up.y
    )


def wall_contact(player: Player, platform: Platform, margin: float = 10.0) -> bool:
    """Whether the player is against one of the platform's side edges.

    The player's vertical span must contain the platform's top, the
    horizontal spans must touch, and the player must be within ``margin``
    of the platform's left or right edge.
    """
    player_right = player.x + player.width
    platform_right = platform.x + platform.width
    spans_top = player.y <= platform.y <= player.y + player.height
    touching = player_right >= platform.x and player.x <= platform_right
    near_edge = (
        player_right <= platform.x + margin
        or player.x >= platform_right - margin
    )
    return spans_top and touching and near_edge
