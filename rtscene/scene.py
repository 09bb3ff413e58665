"""Data types describing a ray-tracing scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Vector:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Ambient:
    light_ratio: float
    color: Color
    identifier: ClassVar[str] = "A"


@dataclass(frozen=True)
class Camera:
    position: Vector
    direction: Vector
    field_of_view: int
    identifier: ClassVar[str] = "C"


@dataclass(frozen=True)
class Light:
    position: Vector
    brightness_ratio: float
    color: Color
    identifier: ClassVar[str] = "L"


@dataclass(frozen=True)
class Sphere:
    position: Vector
    diameter: float
    color: Color
    identifier: ClassVar[str] = "sp"


@dataclass(frozen=True)
class Plane:
    position: Vector
    normal: Vector
    color: Color
    identifier: ClassVar[str] = "pl"


@dataclass(frozen=True)
class Cylinder:
    position: Vector
    direction: Vector
    diameter: float
    height: float
    color: Color
    identifier: ClassVar[str] = "cy"


SceneObject = Union[Sphere, Plane, Cylinder]


@dataclass
class Scene:
    """A whole scene: ambient light, camera, lights and geometric objects."""

    ambient: Optional[Ambient] = None
    camera: Optional[Camera] = None
    lights: list[Light] = field(default_factory=list)
    objects: list[SceneObject] = field(default_factory=list)

    def add_light(self, light: Light) -> None:
        """Append a light source."""
        if not isinstance(light, Light):
            raise TypeError(f"expected a Light, got {type(light).__name__}")
        self.lights.append(light)

    def add_object(self, obj: SceneObject) -> None:
        """Append a sphere, plane or cylinder."""
        if not isinstance(obj, (Sphere, Plane, Cylinder)):
            raise TypeError(f"expected a scene object, got {type(obj).__name__}")
        self.objects.append(obj)