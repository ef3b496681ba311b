"""Fighting-game components, the systems that select them, and entity factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, ClassVar, List, Optional, Tuple

from kombatecs.animation import Rect
from kombatecs.ecs import Entity, Params, World

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

INPUT_HISTORY_SIZE = 20
SPECIAL_MOVE_INPUTS = 3
MAX_NAME_LENGTH = 9

# The game defines more component types than the default world allows.
KOMBAT_PARAMS = Params(max_components=32)


class TextureLoadError(OSError):
    """A fighter's sprite sheet could not be loaded."""


# =============== components ===============


@dataclass
class Position:
    """Coordinates of an object."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Movement:
    """Velocity of an entity."""

    vx: float = 0.0
    vy: float = 0.0


@dataclass
class Texture:
    """A loaded texture and the source rectangle drawn from it."""

    texture: Any = None
    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))


@dataclass
class Sound:
    """Audio data and the device it plays on."""

    spec: Any = None
    device: int = 0
    buffer: bytes = b""

    @property
    def length(self) -> int:
        return len(self.buffer)


@dataclass
class Collider:
    """Physics body and shape used for collisions."""

    body: Any = None
    shape: Any = None
    is_trigger: bool = False


class State(IntEnum):
    """What a player is doing."""

    IDLE = 0
    WALK_LEFT = 1
    WALK_RIGHT = 2
    CROUCH = 3
    WALK = 4
    JUMP = 5
    LOW_PUNCH = 6
    HIGH_PUNCH = 7
    LOW_KICK = 8
    HIGH_KICK = 9
    LOW_JUMP_KICK = 10
    HIGH_JUMP_KICK = 11
    JUMP_PUNCH = 12
    UPPERCUT = 13
    CROUCH_KICK = 14
    LOW_SWEEP_KICK = 15
    HIGH_SWEEP_KICK = 16
    BLOCK = 17
    SPECIAL_MOVE = 18
    CHEER = 19
    WON = 20
    KNOCKED_BACK = 21
    KNOCKED_UP = 22
    HIT = 23


@dataclass
class PlayerState:
    """A player's state and how many frames it stays busy."""

    state: State = State.IDLE
    busy_frames: int = 0


class Input(IntEnum):
    """A single player input."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    LOW_PUNCH = 4
    HIGH_PUNCH = 5
    LOW_KICK = 6
    HIGH_KICK = 7
    BLOCK = 8


@dataclass
class Inputs:
    """Recent inputs with the frame each arrived on."""

    history: List[Input] = field(
        default_factory=lambda: [Input.UP] * INPUT_HISTORY_SIZE
    )
    frame_number: List[int] = field(default_factory=lambda: [0] * INPUT_HISTORY_SIZE)
    index: int = 0

    def __post_init__(self) -> None:
        if len(self.history) != INPUT_HISTORY_SIZE:
            raise ValueError(f"history must hold {INPUT_HISTORY_SIZE} inputs")
        if len(self.frame_number) != INPUT_HISTORY_SIZE:
            raise ValueError(f"frame_number must hold {INPUT_HISTORY_SIZE} frames")


class AttackType(IntEnum):
    """Ordinary attacks."""

    LOW_PUNCH = 0
    HIGH_PUNCH = 1
    LOW_KICK = 2
    HIGH_KICK = 3
    LOW_JUMP_KICK = 4
    HIGH_JUMP_KICK = 5
    JUMP_PUNCH = 6
    UPPERCUT = 7
    CROUCH_KICK = 8
    LOW_SWEEP_KICK = 9
    HIGH_SWEEP_KICK = 10
    BLOCK = 11


class SpecialAttackType(IntEnum):
    """Special moves."""

    FIREBALL = 0
    TELEPORT = 1
    FLYING_KICK = 2
    SPINNING_BIRD_KICK = 3
    SCORPION_PUNCH = 4
    SUBZERO_FREEZE = 5
    SCORPION_TELEPORT = 6
    SUBZERO_SLIDE = 7
    SCORPION_CHAIN = 8


@dataclass
class Attack:
    """An attack with its damage and hitbox."""

    type: AttackType
    damage: float = 0.0
    hitbox: float = 0.0
    hitbox_type: int = 0
    hitbox_size: float = 0.0
    hitbox_duration: float = 0.0


@dataclass
class SpecialAttack:
    """A special move with its damage and hitbox."""

    type: SpecialAttackType
    damage: float = 0.0
    hitbox: float = 0.0
    hitbox_type: int = 0
    hitbox_size: float = 0.0
    hitbox_duration: float = 0.0


@dataclass
class Character:
    """Which fighter a player is and the inputs of its special move."""

    name: str = ""
    special_moves_input: Tuple[Input, ...] = (Input.UP,) * SPECIAL_MOVE_INPUTS

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"character name longer than {MAX_NAME_LENGTH} characters: {self.name!r}"
            )
        self.special_moves_input = tuple(Input(i) for i in self.special_moves_input)
        if len(self.special_moves_input) != SPECIAL_MOVE_INPUTS:
            raise ValueError(f"a special move takes {SPECIAL_MOVE_INPUTS} inputs")

    @property
    def texture_path(self) -> str:
        return f"res/{self.name}.png"


@dataclass
class Health:
    """Maximum and current health."""

    max_health: float = 100.0
    current_health: float = 100.0


@dataclass
class Time:
    """Time remaining in the match."""

    time: float = 0.0


@dataclass
class Score:
    """Round number and both players' scores."""

    round: int = 0
    player1_score: int = 0
    player2_score: int = 0


# =============== systems ===============


class System:
    """Selects every entity that carries all of ``components``."""

    components: ClassVar[Tuple[type, ...]] = ()

    def run(self, world: World) -> List[Entity]:
        mask = world.mask_for(*self.components)
        return [Entity(world, ent) for ent in world.matching(mask)]


class MovementSystem(System):
    """Entities that move."""

    components = (Position, Movement)


class RenderSystem(System):
    """Entities drawn on screen."""

    components = (Position, Texture)


class SoundSystem(System):
    """Entities that play sound."""

    components = (Sound,)


class PlayerSystem(System):
    """Player-controlled fighters."""

    components = (PlayerState, Character)


class CollisionSystem(System):
    """Entities that collide."""

    components = (Collider, Position)


class MatchSystem(System):
    """Entities whose health the match tracks."""

    components = (Health,)


class WinSystem(System):
    """Entities holding the score."""

    components = (Score,)


class ClockSystem(System):
    """Entities holding the match clock."""

    components = (Time,)


class InputSystem(System):
    """Entities that receive input."""

    components = (Inputs,)


class AttackSystem(System):
    """Attacks applied against health."""

    components = (Attack, Health)


class SpecialAttackSystem(System):
    """Special attacks applied against health."""

    components = (Attack, Health)


# =============== entities ===============


def create_player(
    world: World,
    x: float,
    y: float,
    character: Character,
    load_texture: Callable[[str], Any],
) -> int:
    """Create a fighter whose sprite sheet ``load_texture`` loads from its path."""
    entity = Entity.create(world)
    path = character.texture_path
    try:
        texture: Optional[Any] = load_texture(path)
    except OSError as exc:
        entity.destroy()
        raise TextureLoadError(f"failed to load texture {path}: {exc}") from exc
    if texture is None:
        entity.destroy()
        raise TextureLoadError(f"failed to load texture {path}")

    entity.add_all(
        Position(x, y),
        Movement(0.0, 0.0),
        Collider(),
        Texture(texture, Rect(0.0, 0.0, 100.0, 100.0)),
        PlayerState(State.IDLE, 0),
        Inputs(),
        character,
        Health(100.0, 100.0),
    )
    return entity.id


def create_attack(world: World, x: float, y: float, attack_type: AttackType) -> int:
    """Create an attack entity such as a punch or a kick."""
    entity = Entity.create(world)
    entity.add_all(Position(x, y), Collider(), Attack(AttackType(attack_type)))
    return entity.id


def create_special_attack(
    world: World, x: float, y: float, attack_type: SpecialAttackType
) -> int:
    """Create a special attack entity."""
    entity = Entity.create(world)
    entity.add_all(
        Position(x, y), Collider(), SpecialAttack(SpecialAttackType(attack_type))
    )
    return entity.id


def create_boundary(
    world: World, x: float, y: float, width: float, height: float
) -> int:
    """Create a static platform or wall at ``(x, y)``."""
    entity = Entity.create(world)
    entity.add_all(Position(x, y), Collider())
    return entity.id


def create_game_info(world: World, initial_time: float) -> int:
    """Create the entity holding the clock and the score."""
    entity = Entity.create(world)
    entity.add_all(
        Time(initial_time),
        Score(0, 0, 0),
        Position(0.0, 0.0),
        Texture(None, Rect(0.0, 0.0, 100.0, 50.0)),
    )
    return entity.id


def create_background(world: World, texture: Any) -> int:
    """Create a background covering the whole window."""
    entity = Entity.create(world)
    entity.add_all(
        Position(0.0, 0.0),
        Texture(texture, Rect(0.0, 0.0, float(WINDOW_WIDTH), float(WINDOW_HEIGHT))),
    )
    return entity.id