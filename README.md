# kombatecs

A compact entity-component-system (ECS) for games, the components, systems
and entity factories of a two-player fighting game, and a sprite-sheet
animation demo built on pygame.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The ECS

`kombatecs.ecs` keeps entities as small integer ids, handed out from 0
upwards; destroyed ids are recycled by the next `create_entity`. Each entity
carries a `Mask` of the component types it holds. A `ComponentRegistry`
gives each component type a bit index on first use, up to
`Params.max_components` types (10 by default; more raises `ValueError`).

```python
from kombatecs.ecs import Entity, MaskBuilder, World
from kombatecs.kombat import Movement, Position

world = World()
hero = Entity.create(world)
hero.add_all(Position(10.0, 20.0), Movement(1.0, 0.0))

assert hero.has(Position)
hero.get(Position).x += hero.get(Movement).vx

moving = world.mask_for(Position, Movement)
# or: MaskBuilder(world.registry).set(Position).set(Movement).build()
for ent in world.matching(moving):
    print(ent, world.get_component(ent, Position))

hero.remove(Movement)
hero.destroy()
```

Components are stored per type. By default a type gets a `SparseStorage`
(keyed by entity id); `World.set_storage` chooses another for a type:

- `PackedStorage` keeps components contiguous, moving the last one into the
  gap on removal; `at(index)` and `entity(index)` walk it by position.
- `TaggedStorage` records only which entities carry the tag; `get` raises
  `TypeError` because a tag holds no data.

`Params(dynamic_resize=False, ...)` makes a world enforce its
`initial_entities` and `id_bag_size` limits, raising `OverflowError` when
they are exceeded. Unknown entity ids raise `KeyError`.

## The fighting game

`kombatecs.kombat` defines the game's components (`Position`, `Movement`,
`Texture`, `Sound`, `Collider`, `PlayerState`, `Inputs`, `Attack`,
`SpecialAttack`, `Character`, `Health`, `Time`, `Score`) with the enums
`State`, `Input`, `AttackType` and `SpecialAttackType`.

The game uses more component types than a default world allows, so create
its world with `KOMBAT_PARAMS`:

```python
from kombatecs.ecs import World
from kombatecs.kombat import (
    KOMBAT_PARAMS, AttackType, Character, MovementSystem,
    create_attack, create_player,
)

world = World(KOMBAT_PARAMS)
player = create_player(world, 100.0, 300.0, Character("Sub-Zero"), load_texture=my_loader)
create_attack(world, 150.0, 300.0, AttackType.LOW_PUNCH)

for entity in MovementSystem().run(world):
    print(entity.id)
```

`create_player` calls `load_texture` with the path `res/<name>.png`; if it
raises `OSError` or returns `None`, the new entity is destroyed and
`TextureLoadError` is raised. The other factories are `create_special_attack`,
`create_boundary`, `create_game_info` and `create_background`.

Each system (`MovementSystem`, `RenderSystem`, `SoundSystem`,
`PlayerSystem`, `CollisionSystem`, `MatchSystem`, `WinSystem`,
`ClockSystem`, `InputSystem`, `AttackSystem`, `SpecialAttackSystem`) has
`run(world)`, which returns the `Entity` handles carrying all of the
system's component types.

## Sprite animation

`kombatecs.animation` holds the sprite-sheet layout of Sub-Zero (`SUBZERO`),
one `SpriteInfo` per `Action`. `get_frame(character, action, frame, shadow=False)`
returns the sheet `Rect` of a frame, wrapping the frame number around the
action's frame count; actions with no frames raise `ValueError`.
`demo_frames()` yields a (sheet rectangle, screen rectangle) pair for every
tick of `DEMO_SEQUENCE`.

## Demo

```
kombatecs-demo
```

opens an 800×600 window and plays the scripted sequence — stance, walking,
punches, hits and getting up — from the sprite sheet. Options:

- `--image PATH` — the sprite sheet (default `res/Sub-Zero.png`)
- `--delay MS` — milliseconds between frames (default 70)

Close the window to stop early. If the image cannot be loaded, the error is
printed and the command exits with status 1.

## What it does not do

There is no playable game here. The systems only select the entities they
would act on; nothing moves entities, detects collisions, applies damage,
reads the keyboard, plays sound or draws the fight. `Collider` and `Sound`
are plain data holders with no physics or audio behind them. The only thing
that opens a window is the animation demo.