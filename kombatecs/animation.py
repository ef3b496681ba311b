"""Sprite-sheet layout of the fighters and the frame sequence of the intro demo."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Tuple

CHAR_SQUARE_WIDTH = 230
CHAR_SQUARE_HEIGHT = 220
NEXT_FRAME_OFFSET = 4
SHADOW_OFFSET = 8
SCALE_CHARACTER = 0.8

WALK_STEP = 3
TORSO_HIT_STEP = 1


class Action(IntEnum):
    """Every animation a fighter has, in sprite-sheet order."""

    STANCE = 0
    WALK = 1
    LOW_PUNCH = 2
    LOW_PUNCH_SPREE = 3
    BODY_TO_BODY_PUNCH = 4
    HIGH_PUNCH = 5
    HIGH_PUNCH_SPREE = 6
    BODY_TO_BODY_KICK = 7
    LOW_KICK = 8
    LOWKICK_SWEEP = 9
    HIGH_KICK = 10
    HIGHKICK_SWEEP = 11
    CROUCH = 12
    UPPERCUT = 13
    CROUCH_KICK = 14
    JUMP = 15
    JUMP_PUNCH = 16
    JUMP_HIGHKICK = 17
    LANDING = 18
    JUMP_BACK = 19
    ROLL = 20
    FORWARD_JUMP_PUNCH = 21
    JUMP_LOWKICK = 22
    TORSO_HIT = 23
    HEAD_HIT = 24
    KICKBACK_TORSO_HIT = 25
    CROUCH_HIT = 26
    FALL = 27
    UPPERCUT_HIT = 28
    NUTS_HIT = 29
    FALL_INPLACE = 30
    GETUP = 31
    CAUGHT = 32
    THROWN = 33
    BLOCK = 34
    CROUCH_BLOCK = 35
    TURN_RIGHT_TO_LEFT = 36
    TURN_LEFT_TO_RIGHT = 37
    SPECIAL_1 = 38
    SPECIAL_2 = 39
    SPECIAL_3 = 40
    GIDDY = 41
    FINISH_HIM = 42
    GIDDY_FALL = 43
    WIN = 44


@dataclass(frozen=True)
class SpriteInfo:
    """Where an action's first frame sits on the sheet and how many frames follow."""

    frame_count: int
    x: int
    y: int


@dataclass(frozen=True)
class Character:
    """A fighter's sprite table, indexed by :class:`Action`."""

    sprites: Tuple[SpriteInfo, ...]

    def sprite(self, action: Action) -> SpriteInfo:
        return self.sprites[Action(action)]


@dataclass(frozen=True)
class Rect:
    """A rectangle with float coordinates."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class Sequence:
    """One step of an animation script: play ``action`` for ``frames`` ticks."""

    action: Action
    frames: int
    right: bool = False
    walk_back: bool = False


SUBZERO_SPRITE: Tuple[SpriteInfo, ...] = tuple(
    SpriteInfo(count, x, y)
    for count, x, y in (
        (12, 32, 58),  # Stance
        (9, 3074, 58),  # Walk
        (5, 32, 580),  # Low Punch
        (10, 1436, 580),  # Low Punch Spree
        (5, 4010, 580),  # Body to Body Punch
        (5, 32, 1052),  # High Punch
        (10, 1436, 1052),  # High Punch Spree
        (5, 4010, 1052),  # Body to Body Kick
        (7, 32, 1574),  # Low Kick
        (8, 1904, 1574),  # Lowkick Sweep
        (10, 32, 2046),  # High Kick
        (8, 2606, 2046),  # Highkick Sweep
        (5, 32, 2568),  # Crouch
        (5, 1436, 2568),  # Uppercut
        (5, 2840, 2568),  # Crouch Kick
        (1, 32, 3090),  # Jump
        (5, 500, 3090),  # Jump Punch
        (3, 1904, 3090),  # Jump Highkick
        (3, 2840, 3090),  # Landing
        (1, 32, 3562),  # Jump Back
        (7, 500, 3562),  # Roll
        (5, 2372, 3562),  # Forward Jump Punch
        (5, 3776, 3562),  # Jump Lowkick
        (4, 32, 4084),  # Torso Hit
        (4, 1202, 4084),  # Head Hit
        (6, 2372, 4084),  # Kickback Torso Hit
        (3, 4010, 4084),  # Crouch Hit
        (5, 32, 4606),  # Fall
        (6, 1436, 4606),  # Uppercut Hit
        (6, 3074, 4606),  # Nuts Hit
        (6, 32, 5078),  # Fall Inplace
        (5, 1670, 5078),  # Getup
        (6, 32, 5600),  # Caught
        (7, 1670, 5600),  # Thrown
        (5, 32, 6122),  # Block
        (5, 1436, 6122),  # Crouch Block
        (4, 2372, 6122),  # Turn Right to Left
        (4, 3542, 6122),  # Turn Left to Right
        (10, 32, 6644),  # Special 1
        (3, 3542, 6644),  # Special 2
        (-1, -1, -1),  # Special 3
        (7, 32, 7166),  # Giddy
        (0, 1904, 7166),  # Finish Him
        (7, 2606, 7166),  # Giddy Fall
        (4, 32, 7688),  # Win
    )
)

SUBZERO = Character(SUBZERO_SPRITE)

DEMO_SEQUENCE: Tuple[Sequence, ...] = (
    Sequence(Action.STANCE, 30),
    Sequence(Action.WALK, 20),
    Sequence(Action.LOW_PUNCH, 5),
    Sequence(Action.STANCE, 1),
    Sequence(Action.UPPERCUT, 5),
    Sequence(Action.STANCE, 3),
    Sequence(Action.WALK, 20, False, True),
    Sequence(Action.TORSO_HIT, 5),
    Sequence(Action.STANCE, 2),
    Sequence(Action.HEAD_HIT, 5),
    Sequence(Action.STANCE, 2),
    Sequence(Action.UPPERCUT_HIT, 7),
    Sequence(Action.GETUP, 5),
    Sequence(Action.STANCE, 10),
)


def get_frame(
    character: Character, action: Action, frame: int, shadow: bool = False
) -> Rect:
    """Return the sheet rectangle of ``frame`` of ``action``; frames wrap around."""
    sprite = character.sprite(action)
    if sprite.frame_count <= 0:
        raise ValueError(f"action {Action(action).name} has no frames")
    column = frame % sprite.frame_count
    return Rect(
        float(sprite.x + column * (NEXT_FRAME_OFFSET + CHAR_SQUARE_WIDTH)),
        float(sprite.y + (SHADOW_OFFSET + CHAR_SQUARE_HEIGHT if shadow else 0)),
        float(CHAR_SQUARE_WIDTH),
        float(CHAR_SQUARE_HEIGHT),
    )


def demo_frames(
    sequence: Iterable[Sequence] = DEMO_SEQUENCE,
    start_x: float = 200.0,
    start_y: float = 300.0,
) -> Iterator[Tuple[Rect, Rect]]:
    """Yield (sheet rectangle, screen rectangle) for every tick of ``sequence``."""
    width = CHAR_SQUARE_WIDTH * SCALE_CHARACTER
    height = CHAR_SQUARE_HEIGHT * SCALE_CHARACTER
    x = float(start_x)
    uppercut_hit_last = SUBZERO.sprite(Action.UPPERCUT_HIT).frame_count - 1

    for step in sequence:
        for tick in range(step.frames):
            column = tick
            if step.action == Action.WALK:
                if step.walk_back:
                    x -= WALK_STEP
                    column = step.frames - tick - 1
                else:
                    x += WALK_STEP
            if step.action == Action.TORSO_HIT:
                x -= TORSO_HIT_STEP
            if step.action == Action.UPPERCUT_HIT and tick >= uppercut_hit_last:
                column = uppercut_hit_last
            source = get_frame(SUBZERO, step.action, column)
            yield source, Rect(x, float(start_y), width, height)