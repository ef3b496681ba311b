"""A small entity-component-system: entities are integer ids, components live in storages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Set


@dataclass(frozen=True)
class Params:
    """Tuning parameters for a world."""

    dynamic_resize: bool = True
    id_bag_size: int = 5
    initial_entities: int = 10
    initial_packed_size: int = 5
    max_components: int = 10


@dataclass
class Mask:
    """A set of component indices, stored as bits of an integer."""

    bits: int = 0

    @staticmethod
    def _bit(index: int) -> int:
        if index < 0:
            raise ValueError(f"component index must be non-negative, got {index}")
        return 1 << index

    def set(self, index: int) -> None:
        self.bits |= self._bit(index)

    def clear(self, index: int) -> None:
        self.bits &= ~self._bit(index)

    def reset(self) -> None:
        self.bits = 0

    def test(self, index: int) -> bool:
        return bool(self.bits & self._bit(index))

    def contains(self, other: "Mask") -> bool:
        """True when every bit set in ``other`` is also set here."""
        return self.bits & other.bits == other.bits

    def copy(self) -> "Mask":
        return Mask(self.bits)


class ComponentRegistry:
    """Hands out a stable bit index to each component type on first use."""

    def __init__(self, max_components: int = Params.max_components) -> None:
        self._max = max_components
        self._indices: Dict[type, int] = {}

    def index_of(self, component_type: type) -> int:
        try:
            return self._indices[component_type]
        except KeyError:
            if len(self._indices) >= self._max:
                raise ValueError(
                    f"too many component types (limit {self._max})"
                ) from None
            index = len(self._indices)
            self._indices[component_type] = index
            return index

    def __len__(self) -> int:
        return len(self._indices)


class MaskBuilder:
    """Builds a mask from component types, one call at a time."""

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry
        self._mask = Mask()

    def set(self, component_type: type) -> "MaskBuilder":
        self._mask.set(self._registry.index_of(component_type))
        return self

    def build(self) -> Mask:
        return self._mask.copy()


class SparseStorage:
    """Components indexed directly by entity id."""

    def __init__(self) -> None:
        self._items: Dict[int, Any] = {}

    def add(self, ent: int, component: Any) -> None:
        self._items[ent] = component

    def remove(self, ent: int) -> None:
        self._items.pop(ent, None)

    def get(self, ent: int) -> Any:
        try:
            return self._items[ent]
        except KeyError:
            raise KeyError(f"entity {ent} has no component in this storage") from None


class PackedStorage:
    """Components kept contiguous; removal moves the last one into the gap."""

    def __init__(self) -> None:
        self._components: List[Any] = []
        self._owners: List[int] = []
        self._slot_of: Dict[int, int] = {}

    def add(self, ent: int, component: Any) -> None:
        self._slot_of[ent] = len(self._components)
        self._components.append(component)
        self._owners.append(ent)

    def remove(self, ent: int) -> None:
        try:
            slot = self._slot_of.pop(ent)
        except KeyError:
            raise KeyError(f"entity {ent} has no component in this storage") from None
        last_ent = self._owners.pop()
        last_component = self._components.pop()
        if last_ent != ent:
            self._components[slot] = last_component
            self._owners[slot] = last_ent
            self._slot_of[last_ent] = slot

    def get(self, ent: int) -> Any:
        try:
            return self._components[self._slot_of[ent]]
        except KeyError:
            raise KeyError(f"entity {ent} has no component in this storage") from None

    def at(self, index: int) -> Any:
        return self._components[index]

    def entity(self, index: int) -> int:
        return self._owners[index]

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[tuple]:
        return iter(zip(self._owners, self._components))


class TaggedStorage:
    """Keeps only which entities carry the tag; the component has no data."""

    def __init__(self) -> None:
        self._tagged: Set[int] = set()

    def add(self, ent: int, component: Any) -> None:
        self._tagged.add(ent)

    def remove(self, ent: int) -> None:
        self._tagged.discard(ent)

    def get(self, ent: int) -> Any:
        if ent not in self._tagged:
            raise KeyError(f"entity {ent} has no component in this storage")
        raise TypeError("tagged components carry no data")

    def __contains__(self, ent: object) -> bool:
        return ent in self._tagged


class World:
    """Owns entity ids, their masks and the component storages."""

    def __init__(self, params: Optional[Params] = None) -> None:
        self.params = params or Params()
        self.registry = ComponentRegistry(self.params.max_components)
        self._masks: List[Mask] = []
        self._free_ids: List[int] = []
        self._storages: Dict[type, Any] = {}

    def create_entity(self) -> int:
        if self._free_ids:
            return self._free_ids.pop()
        if (
            not self.params.dynamic_resize
            and len(self._masks) >= self.params.initial_entities
        ):
            raise OverflowError(
                f"entity limit of {self.params.initial_entities} reached"
            )
        self._masks.append(Mask())
        return len(self._masks) - 1

    def destroy_entity(self, ent: int) -> None:
        self._check(ent)
        if ent in self._free_ids:
            raise ValueError(f"entity {ent} is already destroyed")
        if (
            not self.params.dynamic_resize
            and len(self._free_ids) >= self.params.id_bag_size
        ):
            raise OverflowError(f"free id limit of {self.params.id_bag_size} reached")
        self._masks[ent].reset()
        self._free_ids.append(ent)

    def _check(self, ent: int) -> None:
        if not 0 <= ent < len(self._masks):
            raise KeyError(f"unknown entity {ent}")

    def mask(self, ent: int) -> Mask:
        self._check(ent)
        return self._masks[ent]

    def max_id(self) -> int:
        return len(self._masks) - 1

    def set_storage(self, component_type: type, storage: Any) -> None:
        self._storages[component_type] = storage

    def _storage(self, component_type: type) -> Any:
        storage = self._storages.get(component_type)
        if storage is None:
            storage = self._storages[component_type] = SparseStorage()
        return storage

    def get_component(self, ent: int, component_type: type) -> Any:
        self._check(ent)
        return self._storage(component_type).get(ent)

    def add_component(self, ent: int, component: Any) -> None:
        self._check(ent)
        component_type = type(component)
        self._masks[ent].set(self.registry.index_of(component_type))
        self._storage(component_type).add(ent, component)

    def add_components(self, ent: int, *args: Any) -> None:
        for component in args:
            self.add_component(ent, component)

    def del_component(self, ent: int, component_type: type) -> None:
        self._check(ent)
        self._masks[ent].clear(self.registry.index_of(component_type))
        self._storage(component_type).remove(ent)

    def del_components(self, ent: int, *args: type) -> None:
        for component_type in args:
            self.del_component(ent, component_type)

    def mask_for(self, *args: type) -> Mask:
        builder = MaskBuilder(self.registry)
        for component_type in args:
            builder.set(component_type)
        return builder.build()

    def matching(self, mask: Mask) -> Iterator[int]:
        """Yield every entity id whose mask holds all bits of ``mask``."""
        for ent, ent_mask in enumerate(self._masks):
            if ent_mask.contains(mask):
                yield ent


@dataclass(frozen=True)
class Entity:
    """A handle pairing an entity id with its world."""

    world: World = field(compare=False, repr=False)
    id: int

    @classmethod
    def create(cls, world: World) -> "Entity":
        return cls(world, world.create_entity())

    def destroy(self) -> None:
        self.world.destroy_entity(self.id)

    def mask(self) -> Mask:
        return self.world.mask(self.id)

    def get(self, component_type: type) -> Any:
        return self.world.get_component(self.id, component_type)

    def add(self, component: Any) -> None:
        self.world.add_component(self.id, component)

    def remove(self, component_type: type) -> None:
        self.world.del_component(self.id, component_type)

    def add_all(self, *args: Any) -> None:
        self.world.add_components(self.id, *args)

    def remove_all(self, *args: type) -> None:
        self.world.del_components(self.id, *args)

    def has(self, component_type: type) -> bool:
        return self.mask().test(self.world.registry.index_of(component_type))

    def test(self, mask: Mask) -> bool:
        return self.mask().contains(mask)