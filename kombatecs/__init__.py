"""A small entity-component-system, fighting-game components and systems, and a sprite animation demo."""

__version__ = "0.1.0"

__all__ = ["ecs", "animation", "demo", "kombat"]