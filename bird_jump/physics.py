"""Physics profiles: the four per-frame constants that tune the game feel.

There are exactly two profiles. Narrow (mobile) viewports get a much slower
game with a wider gap so it stays playable on a touch screen.
"""

from collections import namedtuple

from . import config

PhysicsProfile = namedtuple("PhysicsProfile", ["name", "gravity", "jump_impulse", "scroll_speed", "gap_size"])

DESKTOP_PHYSICS = PhysicsProfile(
    name="desktop",
    gravity=config.DESKTOP_GRAVITY,
    jump_impulse=config.DESKTOP_JUMP_IMPULSE,
    scroll_speed=config.DESKTOP_SCROLL_SPEED,
    gap_size=config.DESKTOP_GAP_SIZE,
)

MOBILE_PHYSICS = PhysicsProfile(
    name="mobile",
    gravity=config.DESKTOP_GRAVITY * config.MOBILE_SLOWDOWN,
    jump_impulse=config.DESKTOP_JUMP_IMPULSE * config.MOBILE_JUMP_SCALE,
    scroll_speed=config.DESKTOP_SCROLL_SPEED * config.MOBILE_SLOWDOWN,
    gap_size=config.MOBILE_GAP_SIZE,
)


def select_profile(width):
    """Return the profile for a viewport of the given width."""
    if width < config.MOBILE_BREAKPOINT:
        return MOBILE_PHYSICS
    return DESKTOP_PHYSICS
