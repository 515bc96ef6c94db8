"""Entities with typed components, named lookup and component lifecycle events."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Optional, TypeVar, Union

from wfengine.events import EventDispatcher

EntityID = int
ResourceID = int
T = TypeVar("T")
SignalCallback = Callable[[EntityID], None]


class Registry:
    """Stores components per entity, keyed by component type."""

    def __init__(self) -> None:
        self._ids = count()
        self._entities: dict[EntityID, dict[type, Any]] = {}
        self._construct: defaultdict[type, list[SignalCallback]] = defaultdict(list)
        self._destroy: defaultdict[type, list[SignalCallback]] = defaultdict(list)

    def _components(self, entity: EntityID) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except (KeyError, TypeError):
            raise KeyError(f"invalid entity: {entity!r}") from None

    def create(self) -> EntityID:
        """Create an empty entity and return its id."""
        entity = next(self._ids)
        self._entities[entity] = {}
        return entity

    def valid(self, entity: Optional[EntityID]) -> bool:
        return entity is not None and entity in self._entities

    def destroy(self, entity: EntityID) -> None:
        """Remove every component of ``entity`` and invalidate it."""
        components = self._components(entity)
        for component_type in list(components):
            self.remove(entity, component_type)
        del self._entities[entity]

    def clear(self) -> None:
        """Destroy all entities."""
        for entity in list(self._entities):
            self.destroy(entity)

    def emplace(self, entity: EntityID, component: T) -> T:
        """Attach ``component`` to ``entity``; one component per type."""
        components = self._components(entity)
        component_type = type(component)
        if component_type in components:
            raise ValueError(f"entity {entity} already has a {component_type.__name__}")
        components[component_type] = component
        for callback in list(self._construct[component_type]):
            callback(entity)
        return component

    def get(self, entity: EntityID, component_type: type[T]) -> T:
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None

    def all_of(self, entity: EntityID, *component_types: type) -> bool:
        components = self._components(entity)
        return all(t in components for t in component_types)

    def remove(self, entity: EntityID, component_type: type) -> bool:
        """Detach a component if present; returns whether one was removed."""
        components = self._components(entity)
        if component_type not in components:
            return False
        for callback in list(self._destroy[component_type]):
            callback(entity)
        del components[component_type]
        return True

    def view(self, *component_types: type) -> list[EntityID]:
        """Entities, in creation order, that have every one of the given types."""
        if not component_types:
            raise TypeError("view() needs at least one component type")
        return [
            entity
            for entity, components in self._entities.items()
            if all(t in components for t in component_types)
        ]

    def on_construct(self, component_type: type, callback: SignalCallback) -> None:
        """Call ``callback(entity)`` after a component of this type is attached."""
        if callback not in self._construct[component_type]:
            self._construct[component_type].append(callback)

    def on_destroy(self, component_type: type, callback: SignalCallback) -> None:
        """Call ``callback(entity)`` before a component of this type is detached."""
        if callback not in self._destroy[component_type]:
            self._destroy[component_type].append(callback)


@dataclass(eq=False)
class Entity:
    """A handle to an entity in a registry, with an optional name."""

    registry: Registry
    handle: Optional[EntityID]
    name: str = ""

    def is_valid(self) -> bool:
        return self.registry.valid(self.handle)

    def add_component(self, component: Any) -> Any:
        """Attach a component instance, or a default instance of a component class."""
        if isinstance(component, type):
            component = component()
        return self.registry.emplace(self.handle, component)

    def try_get_component(self, component_type: type[T]) -> Optional[T]:
        if not self.has_component(component_type):
            return None
        return self.registry.get(self.handle, component_type)

    def get_component(self, component_type: type[T]) -> T:
        return self.registry.get(self.handle, component_type)

    def has_component(self, component_type: type) -> bool:
        return self.registry.all_of(self.handle, component_type)

    def remove_component(self, component_type: type) -> None:
        self.registry.remove(self.handle, component_type)

    def destroy(self) -> None:
        self.registry.destroy(self.handle)
        self.handle = None


class ComponentEvent:
    """Base for events raised when a component is attached to or removed from an entity."""

    def __init__(self, entity: Entity) -> None:
        self.entity = entity


Key = Union[EntityID, str]


class EntityManager:
    """Entity registry with name lookup and component create/remove callbacks."""

    def __init__(self) -> None:
        self._registry = Registry()
        self._dispatcher = EventDispatcher()
        self._name_to_id: dict[str, EntityID] = {}
        self._id_to_name: dict[EntityID, str] = {}
        self._event_types: dict[tuple[str, type], type[ComponentEvent]] = {}

    @property
    def registry(self) -> Registry:
        return self._registry

    def create_id(self) -> EntityID:
        return self._registry.create()

    def create(self) -> Entity:
        return Entity(self._registry, self._registry.create())

    def create_named(self, name: str) -> Entity:
        """Create an entity that can be looked up by ``name``."""
        if self.is_valid(name):
            raise ValueError(f"Entity with name already exists: {name}")
        entity = self.create()
        entity.name = name
        self._name_to_id[name] = entity.handle
        self._id_to_name[entity.handle] = name
        return entity

    def retarget_name(self, name: str, new_id: EntityID) -> None:
        """Point ``name`` at a different entity."""
        if not self.is_valid(new_id):
            raise KeyError(f"No valid entity with name: {name}")
        self._remove_name_lookup(name)
        self._name_to_id[name] = new_id
        self._id_to_name[new_id] = name

    def get(self, key: Key) -> Entity:
        """Wrap an entity given its id or its name."""
        if isinstance(key, str):
            if not self.is_valid(key):
                raise KeyError(f"No valid entity with name: {key}")
            key = self._name_to_id[key]
        return Entity(self._registry, key, self.name_of(key))

    def name_of(self, entity_id: EntityID) -> str:
        return self._id_to_name.get(entity_id, "")

    def is_valid(self, key: Key) -> bool:
        if isinstance(key, str):
            return key in self._name_to_id and self._registry.valid(self._name_to_id[key])
        return self._registry.valid(key)

    def destroy(self, key: Key) -> None:
        """Destroy an entity by id or name; an unknown name is ignored."""
        if isinstance(key, str):
            if not self.is_valid(key):
                return
            key = self._name_to_id[key]
        self._remove_id_lookup(key)
        self._registry.destroy(key)

    def clear(self) -> None:
        self._registry.clear()

    def find(self, *component_types: type) -> list[EntityID]:
        return self._registry.view(*component_types)

    def each(self, func: Callable[..., Any], *component_types: type) -> None:
        """Call ``func(entity, *components)`` for every matching entity."""
        for entity in self.find(*component_types):
            func(entity, *(self._registry.get(entity, t) for t in component_types))

    def first(self, *component_types: type) -> tuple:
        """The first matching entity id followed by its requested components."""
        matches = self.find(*component_types)
        if not matches:
            raise LookupError("first(): No entity found with requested components")
        entity = matches[0]
        return (entity, *(self._registry.get(entity, t) for t in component_types))

    def on_create(self, component_type: type, func: Callable[[Entity], Any]) -> None:
        """Call ``func(entity)`` whenever a component of this type is attached."""
        self._listen("created", self._registry.on_construct, component_type, func)

    def on_remove(self, component_type: type, func: Callable[[Entity], Any]) -> None:
        """Call ``func(entity)`` whenever a component of this type is removed."""
        self._listen("removed", self._registry.on_destroy, component_type, func)

    def _listen(
        self,
        kind: str,
        connect: Callable[[type, SignalCallback], None],
        component_type: type,
        func: Callable[[Entity], Any],
    ) -> None:
        key = (kind, component_type)
        event_type = self._event_types.get(key)
        if event_type is None:
            event_type = type(f"{component_type.__name__}{kind.capitalize()}", (ComponentEvent,), {})
            self._event_types[key] = event_type

            def forward(entity_id: EntityID) -> None:
                self._dispatcher.dispatch(event_type(self.get(entity_id)))

            connect(component_type, forward)
        self._dispatcher.on(event_type, lambda event: func(event.entity))

    def _remove_id_lookup(self, entity_id: EntityID, recurse: bool = True) -> None:
        if entity_id in self._id_to_name:
            if recurse:
                self._remove_name_lookup(self._id_to_name[entity_id], False)
            del self._id_to_name[entity_id]

    def _remove_name_lookup(self, name: str, recurse: bool = True) -> None:
        if name in self._name_to_id:
            if recurse:
                self._remove_id_lookup(self._name_to_id[name], False)
            del self._name_to_id[name]


class ResourceManager(EntityManager):
    """Entity manager used for resources; listeners clean up on removal."""

    def shutdown(self) -> None:
        self.clear()