"""Actors: a transform, a list of components and child actors."""

from __future__ import annotations

from typing import Any

from actorengine.components import Component, TransformComponent
from actorengine.game_input import GameInput
from actorengine.resources import Resources


class Actor:
    """A scene object whose children move relative to it."""

    def __init__(self, transform_component: TransformComponent) -> None:
        self.transform_component = transform_component
        transform_component.owner = self
        self.components: list[Component] = []
        self.children: list[Actor] = []

    def init(self, resources: Resources, renderer: Any) -> None:
        """Initialise components, then children."""
        for component in self.components:
            component.init(resources, renderer)
        for child in self.children:
            child.init(resources, renderer)

    def update(self, delta_ms: float, game_input: GameInput) -> None:
        """Update the transform, the components, then the children under the new transform."""
        self.transform_component.update(delta_ms, game_input)
        transform = self.transform_component.transform()
        for component in self.components:
            component.update(delta_ms, game_input)
        for child in self.children:
            child.transform_component.parent_transform = transform
            child.update(delta_ms, game_input)

    def render(self, renderer: Any) -> None:
        """Render components, then children."""
        for component in self.components:
            component.render(renderer)
        for child in self.children:
            child.render(renderer)

    def add_component(self, component: Component) -> None:
        """Attach a component; a transform component replaces the current transform."""
        if isinstance(component, TransformComponent):
            self.transform_component = component
        else:
            self.components.append(component)
        component.owner = self

    def add_child(self, actor: Actor) -> None:
        """Attach a child actor."""
        self.children.append(actor)