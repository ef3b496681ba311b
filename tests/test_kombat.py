import pytest

from kombatecs.animation import Rect
from kombatecs.ecs import World
from kombatecs.kombat import (
    KOMBAT_PARAMS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Attack,
    AttackSystem,
    AttackType,
    Character,
    ClockSystem,
    Collider,
    CollisionSystem,
    Health,
    Input,
    Inputs,
    InputSystem,
    MatchSystem,
    Movement,
    MovementSystem,
    PlayerState,
    PlayerSystem,
    Position,
    RenderSystem,
    Score,
    SoundSystem,
    SpecialAttack,
    SpecialAttackSystem,
    SpecialAttackType,
    State,
    Texture,
    TextureLoadError,
    Time,
    WinSystem,
    create_attack,
    create_background,
    create_boundary,
    create_game_info,
    create_player,
    create_special_attack,
)


@pytest.fixture
def world():
    return World(KOMBAT_PARAMS)


class _Loader:
    def __init__(self, result="sheet"):
        self.result = result
        self.paths = []

    def __call__(self, path):
        self.paths.append(path)
        return self.result


def test_create_player_loads_texture_by_name(world):
    loader = _Loader()
    ent = create_player(world, 10.0, 20.0, Character("Sub-Zero"), loader)
    assert loader.paths == ["res/Sub-Zero.png"]
    assert world.get_component(ent, Position) == Position(10.0, 20.0)
    texture = world.get_component(ent, Texture)
    assert texture.texture == "sheet"
    assert texture.rect == Rect(0.0, 0.0, 100.0, 100.0)


def test_create_player_components(world):
    ent = create_player(world, 1.0, 2.0, Character("Scorpion"), _Loader())
    assert world.get_component(ent, PlayerState) == PlayerState(State.IDLE, 0)
    assert world.get_component(ent, Health) == Health(100.0, 100.0)
    assert world.get_component(ent, Movement) == Movement(0.0, 0.0)
    assert world.get_component(ent, Character).name == "Scorpion"
    assert world.get_component(ent, Inputs) == Inputs()


def test_create_player_failed_load_raises_and_frees_id(world):
    with pytest.raises(TextureLoadError):
        create_player(world, 0.0, 0.0, Character("Nobody"), _Loader(None))
    assert world.create_entity() == 0


def test_create_player_loader_oserror(world):
    def failing(path):
        raise FileNotFoundError(path)

    with pytest.raises(TextureLoadError):
        create_player(world, 0.0, 0.0, Character("Nobody"), failing)


def test_create_attack(world):
    ent = create_attack(world, 3.0, 4.0, AttackType.UPPERCUT)
    attack = world.get_component(ent, Attack)
    assert attack.type is AttackType.UPPERCUT
    assert attack.damage == 0.0
    assert world.get_component(ent, Position) == Position(3.0, 4.0)


def test_create_special_attack(world):
    ent = create_special_attack(world, 5.0, 6.0, SpecialAttackType.SUBZERO_FREEZE)
    assert world.get_component(ent, SpecialAttack).type is SpecialAttackType.SUBZERO_FREEZE
    assert world.get_component(ent, Collider) == Collider()


def test_create_boundary_has_position_and_collider(world):
    ent = create_boundary(world, 7.0, 8.0, 100.0, 5.0)
    assert [e.id for e in CollisionSystem().run(world)] == [ent]
    assert MovementSystem().run(world) == []


def test_create_game_info(world):
    ent = create_game_info(world, 99.0)
    assert world.get_component(ent, Time) == Time(99.0)
    assert world.get_component(ent, Score) == Score(0, 0, 0)
    assert world.get_component(ent, Texture).rect == Rect(0.0, 0.0, 100.0, 50.0)


def test_create_background_covers_window(world):
    ent = create_background(world, "bg")
    texture = world.get_component(ent, Texture)
    assert texture.texture == "bg"
    assert texture.rect == Rect(0.0, 0.0, float(WINDOW_WIDTH), float(WINDOW_HEIGHT))


def test_systems_select_matching_entities(world):
    player = create_player(world, 0.0, 0.0, Character("Sub-Zero"), _Loader())
    attack = create_attack(world, 0.0, 0.0, AttackType.LOW_KICK)
    info = create_game_info(world, 60.0)
    background = create_background(world, "bg")

    assert [e.id for e in MovementSystem().run(world)] == [player]
    assert [e.id for e in RenderSystem().run(world)] == [player, info, background]
    assert [e.id for e in PlayerSystem().run(world)] == [player]
    assert [e.id for e in CollisionSystem().run(world)] == [player, attack]
    assert [e.id for e in MatchSystem().run(world)] == [player]
    assert [e.id for e in WinSystem().run(world)] == [info]
    assert [e.id for e in ClockSystem().run(world)] == [info]
    assert [e.id for e in InputSystem().run(world)] == [player]
    assert SoundSystem().run(world) == []
    assert AttackSystem().run(world) == []
    assert SpecialAttackSystem().run(world) == []


def test_destroyed_entity_leaves_systems(world):
    ent = create_game_info(world, 30.0)
    world.destroy_entity(ent)
    assert ClockSystem().run(world) == []


def test_character_name_too_long():
    with pytest.raises(ValueError):
        Character("Sub-Zero-Long")


def test_character_needs_three_special_inputs():
    with pytest.raises(ValueError):
        Character("Kano", (Input.DOWN,))


def test_inputs_defaults_sized():
    inputs = Inputs()
    assert len(inputs.history) == len(inputs.frame_number)
    assert all(i is Input.UP for i in inputs.history)
    assert inputs.index == 0


def test_inputs_rejects_wrong_size():
    with pytest.raises(ValueError):
        Inputs(history=[Input.UP])