"""Weather preset table loading from JSON files."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from types import SimpleNamespace

from .errors import PresetTableError
from .models.weather import WeatherPreset
from .utils import dict_to_namespace

PRESET_KEYS = (
    "sun_intensity",
    "sun_color",
    "ambient_intensity",
    "ambient_color",
    "hemisphere_intensity",
    "hemisphere_sky_color",
    "hemisphere_ground_color",
    "shadow_bias",
    "moon_factor",
)
INTENSITY_KEYS = ("sun_intensity", "ambient_intensity", "hemisphere_intensity")
TWILIGHT_KEYS = ("sun_color", "ambient_color", "sky_color", "ground_color")

DEFAULT_PRESETS_PATH = Path(__file__).parent / "data" / "weather_presets.json"


def load_presets(presets_json_path: str | Path | None = None) -> SimpleNamespace:
    """
    Load weather preset tables from a JSON file.

    Each preset defines intensities as ``{"base": b, "slope": s}`` (the
    intensity is ``b + s * altitude_factor``), colors as ``"#rrggbb"``,
    a shadow bias and a moonlight factor. The file also defines the
    twilight palette every preset fades toward.

    Args:
        presets_json_path: Path to a preset JSON file.
            If None (default), loads the bundled weather_presets.json.

    Returns:
        SimpleNamespace with ``presets`` (keyed by preset name) and ``twilight``.

    Raises:
        FileNotFoundError: If the file does not exist.
        PresetTableError: If a preset or the twilight palette is incomplete.

    Examples:
        >>> tables = load_presets()
        >>> tables.presets["overcast"].moon_factor
        0.3
        >>> tables.twilight.sun_color
        '#ff8c5c'
    """
    if presets_json_path is None:
        presets_path = DEFAULT_PRESETS_PATH
    else:
        presets_path = Path(presets_json_path)

    if not presets_path.exists():
        raise FileNotFoundError(f"Preset table file not found: {presets_path}")

    with open(presets_path) as f:
        data = json.load(f)

    _validate(data)

    # Keep the presets mapping a dict: names like "partly-cloudy" are not identifiers
    return SimpleNamespace(
        presets={name: dict_to_namespace(table) for name, table in data["presets"].items()},
        twilight=dict_to_namespace(data["twilight"]),
    )


@lru_cache(maxsize=8)
def cached_presets(presets_json_path: str | None = None) -> SimpleNamespace:
    """Load a preset table once per path; the bundled table is shared by all engines."""
    return load_presets(presets_json_path)


def _validate(data: dict) -> None:
    presets = data.get("presets")
    if not isinstance(presets, dict):
        raise PresetTableError("presets", "missing 'presets' mapping")

    for weather in WeatherPreset:
        table = presets.get(weather.value)
        if table is None:
            raise PresetTableError(weather.value, "preset not defined")
        for key in PRESET_KEYS:
            if key not in table:
                raise PresetTableError(weather.value, f"missing key '{key}'")
        for key in INTENSITY_KEYS:
            if not isinstance(table[key], dict) or not {"base", "slope"} <= set(table[key]):
                raise PresetTableError(weather.value, f"'{key}' must define 'base' and 'slope'")

    twilight = data.get("twilight")
    if not isinstance(twilight, dict):
        raise PresetTableError("twilight", "missing 'twilight' palette")
    for key in TWILIGHT_KEYS:
        if key not in twilight:
            raise PresetTableError("twilight", f"missing key '{key}'")
