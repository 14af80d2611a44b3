"""Scene lifecycle: scenes, scene factories and a manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional


class BaseScene(ABC):
    """A game scene with a fixed lifecycle driven by a SceneManager."""

    scene_manager: Optional["SceneManager"] = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene before its first update."""

    @abstractmethod
    def finalize(self) -> None:
        """Release what the scene holds before it is dropped."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Render the scene."""

    def set_scene_manager(self, scene_manager: "SceneManager") -> None:
        """Attach the manager that runs this scene."""
        self.scene_manager = scene_manager


class AbstractSceneFactory(ABC):
    """Creates scenes by name."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> BaseScene:
        """Build a new scene for ``scene_name``."""


SceneConstructor = Callable[..., BaseScene]


class SceneFactory(AbstractSceneFactory):
    """A factory that builds registered scenes, passing each the shared context.

    The positional and keyword arguments given to the factory are handed to
    every scene constructor it calls.
    """

    def __init__(self, *context: Any, **named_context: Any) -> None:
        self._context = context
        self._named_context = named_context
        self._constructors: Dict[str, SceneConstructor] = {}

    def register(self, scene_name: str, constructor: SceneConstructor) -> None:
        """Associate ``scene_name`` with a scene constructor."""
        self._constructors[scene_name] = constructor

    def create_scene(self, scene_name: str) -> BaseScene:
        """Build the scene registered under ``scene_name``; KeyError if unknown."""
        try:
            constructor = self._constructors[scene_name]
        except KeyError:
            raise KeyError(f"no scene registered as {scene_name!r}") from None
        return constructor(*self._context, **self._named_context)


class SceneManager:
    """Runs one scene at a time and switches to a reserved scene on the next update."""

    def __init__(self, factory: Optional[AbstractSceneFactory] = None) -> None:
        self._scene: Optional[BaseScene] = None
        self._next_scene: Optional[BaseScene] = None
        self._factory = factory

    @property
    def current_scene(self) -> Optional[BaseScene]:
        """The scene being run, if any."""
        return self._scene

    @property
    def next_scene(self) -> Optional[BaseScene]:
        """The scene reserved to start on the next update, if any."""
        return self._next_scene

    def set_next_scene(self, scene: BaseScene) -> None:
        """Reserve ``scene`` to replace the current one on the next update."""
        self._next_scene = scene

    def set_scene_factory(self, factory: AbstractSceneFactory) -> None:
        """Set the factory used by change_scene."""
        self._factory = factory

    def change_scene(self, scene_name: str) -> BaseScene:
        """Create a scene by name through the factory and reserve it."""
        if self._factory is None:
            raise RuntimeError("no scene factory has been set")
        scene = self._factory.create_scene(scene_name)
        self.set_next_scene(scene)
        return scene

    def update(self) -> None:
        """Switch to the reserved scene if there is one, then update the current scene."""
        if self._next_scene is not None:
            if self._scene is not None:
                self._scene.finalize()
            self._scene, self._next_scene = self._next_scene, None
            self._scene.set_scene_manager(self)
            self._scene.initialize()
        if self._scene is not None:
            self._scene.update()

    def draw(self) -> None:
        """Draw the current scene; RuntimeError if none is running."""
        if self._scene is None:
            raise RuntimeError("no scene is running")
        self._scene.draw()

    def close(self) -> None:
        """Finalize and drop the current scene."""
        if self._scene is not None:
            scene, self._scene = self._scene, None
            scene.finalize()

    def __enter__(self) -> "SceneManager":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()