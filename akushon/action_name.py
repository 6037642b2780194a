"""Names of the standard actions."""

from __future__ import annotations

from enum import Enum


class ActionName(str, Enum):
    """Well-known action names; members compare equal to their strings."""

    INIT = "init"
    WALKREADY = "walk_ready"
    SIT_DOWN = "sit_down"
    FORWARD_UP = "forward_up"
    BACKWARD_UP = "backward_up"
    LEFTWARD_UP = "leftward_up"
    RIGHTWARD_UP = "rightward_up"
    RIGHT_KICK = "right_kick"
    LEFT_KICK = "left_kick"
    RIGHT_KICK_SHORT = "right_kick_short"
    LEFT_KICK_SHORT = "left_kick_short"
    RIGHT_KICK_WIDE = "right_kick_wide"
    LEFT_KICK_WIDE = "left_kick_wide"
    LEFT_SIDEKICK = "left_sidekick"
    RIGHT_SIDEKICK = "right_sidekick"
    KEEPER_SIT = "keeper_sit"
    KEEPER_UP = "keeper_up"
    RIGHT_SIDEKICK_90 = "right_sidekick90"
    LEFT_SIDEKICK_90 = "left_sidekick90"
    DK_READY = "dk_ready"
    DK_KICK = "dk_kick"
    HIGH_KICK = "high_kick"
    PARKOUR_UP = "parkour_up"
    PARKOUR_DOWN = "parkour_down"
    LEFT_KICK_CENTER = "left_kick_center"
    RIGHT_KICK_CENTER = "right_kick_center"

    def __str__(self) -> str:
        return self.value


_INDEX = {
    "init": 0,
    "walk_ready": 1,
    "sit_down": 2,
    "forward_up": 3,
    "backward_up": 4,
    "leftward_up": 5,
}


def action_index(name: str) -> int:
    """Return the numeric index of an indexed action name; KeyError otherwise."""
    return _INDEX[str(name)]