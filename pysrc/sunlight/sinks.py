"""
Light sink interfaces and the rig that drives them.

The engine only produces LightingState snapshots. A host adapts its own
light objects to the small protocols below (direction, intensity, color,
visibility) and hands them to a ``LightRig``, which subscribes to
state-changed and pushes every snapshot into them.

Directions are placement vectors in host axes (+X east, +Y up, +Z south);
directional lights placed there should target the origin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import SunlightEvent, Unsubscribe
from .models.config import HelperOptions
from .sunlight_logging import get_logger

if TYPE_CHECKING:
    from .engine import SunLightEngine
    from .models.color import Color
    from .models.state import LightingState, Vector3

logger = get_logger(__name__)


@runtime_checkable
class LightSink(Protocol):
    """Minimal light interface a host object must offer."""

    def set_direction(self, direction: Vector3) -> None:
        """Place the light at this vector, aimed at the origin."""
        ...

    def set_intensity(self, intensity: float) -> None: ...

    def set_color(self, color: Color) -> None: ...

    def set_visible(self, visible: bool) -> None: ...


@runtime_checkable
class HemisphereSink(LightSink, Protocol):
    """Sky/ground light; ``set_color`` receives the sky color."""

    def set_ground_color(self, color: Color) -> None: ...


@runtime_checkable
class HelperSink(Protocol):
    """Optional: a sink that can show a helper gizmo for its light."""

    def set_helper_visible(self, visible: bool, size: float, color: int) -> None: ...


class LightRig:
    """
    Binds up to four host lights to an engine.

    Every sink is optional. Sun and moon sinks receive direction,
    intensity, color and visibility; the ambient sink receives intensity
    and color; the hemisphere sink receives intensity, sky and ground
    colors. Sinks that also implement ``HelperSink`` get helper
    visibility from ``HelperOptions`` (the moon helper is shown only
    while the moon itself is visible).

    Args:
        sun: Directional sun light.
        moon: Directional moon light. Hidden whenever the snapshot has no moon.
        ambient: Ambient fill light.
        hemisphere: Hemisphere sky/ground light.
        helpers: Helper toggles. None uses ``HelperOptions()`` (all hidden).

    Example:
        >>> rig = LightRig(sun=SceneDirectionalLight(scene), ambient=SceneAmbientLight(scene))
        >>> rig.attach(engine)
        >>> engine.set_time_of_day(18.5)  # lights follow
        >>> rig.detach()
    """

    def __init__(
        self,
        sun: LightSink | None = None,
        moon: LightSink | None = None,
        ambient: LightSink | None = None,
        hemisphere: HemisphereSink | None = None,
        helpers: HelperOptions | None = None,
    ):
        self.sun = sun
        self.moon = moon
        self.ambient = ambient
        self.hemisphere = hemisphere
        self.helpers = helpers if helpers is not None else HelperOptions()
        self._unsubscribe: Unsubscribe | None = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def attach(self, engine: SunLightEngine) -> None:
        """
        Subscribe to an engine and apply its current snapshot immediately.

        Attaching again first detaches from the previous engine.
        """
        self.detach()
        self._unsubscribe = engine.on(SunlightEvent.STATE_CHANGED, self.apply)
        bound = [name for name in ("sun", "moon", "ambient", "hemisphere") if getattr(self, name) is not None]
        logger.debug(f"Light rig attached ({', '.join(bound) or 'no sinks'})")
        state = engine.get_state()
        if state is not None:
            self.apply(state)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def apply(self, state: LightingState) -> None:
        """Push one snapshot into every configured sink."""
        if self.sun is not None:
            self.sun.set_direction(state.sun_direction)
            self.sun.set_intensity(state.sun_intensity)
            self.sun.set_color(state.sun_color)
            self.sun.set_visible(state.sun_visible)
            self._apply_helper(
                self.sun, self.helpers.show_sun_helper, self.helpers.sun_helper_size, self.helpers.sun_helper_color
            )

        if self.moon is not None:
            if state.moon is None:
                self.moon.set_visible(False)
                self._apply_helper(self.moon, False, self.helpers.moon_helper_size, self.helpers.moon_helper_color)
            else:
                self.moon.set_direction(state.moon_direction)
                self.moon.set_intensity(state.moon_intensity)
                self.moon.set_color(state.moon_color)
                self.moon.set_visible(state.moon_visible)
                self._apply_helper(
                    self.moon,
                    self.helpers.show_moon_helper and state.moon_visible,
                    self.helpers.moon_helper_size,
                    self.helpers.moon_helper_color,
                )

        if self.ambient is not None:
            self.ambient.set_intensity(state.ambient_intensity)
            self.ambient.set_color(state.ambient_color)
            self.ambient.set_visible(True)

        if self.hemisphere is not None:
            self.hemisphere.set_intensity(state.hemisphere_intensity)
            self.hemisphere.set_color(state.sky_color)
            self.hemisphere.set_ground_color(state.ground_color)
            self.hemisphere.set_visible(True)

    @staticmethod
    def _apply_helper(sink: LightSink, visible: bool, size: float, color: int) -> None:
        if isinstance(sink, HelperSink):
            sink.set_helper_visible(visible, size, color)
