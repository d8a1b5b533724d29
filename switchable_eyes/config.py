import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
import yaml

log = logging.getLogger("switchable-eyes")


@dataclass
class WindowConfig:
    width: int = 480
    height: int = 320
    title: str = "Switchable Eyes"
    fps_target: int = 60
    chromakey: tuple = (1, 0, 1)
    supersample: int = 1
    # Pixels fainter than this become the chroma key. Blood particles fade
    # down to alpha 10-20 before they are removed.
    key_threshold: int = 16


@dataclass
class EyeConfig:
    eye_radius: int = 64
    pupil_radius: int = 24
    creepy_pupil_radius: int = 30
    eye_spacing: int = 96
    shadow_offset: float = 2.4


@dataclass
class GestureConfig:
    double_click_ms: int = 500
    drag_delay_ms: int = 200


@dataclass
class WanderConfig:
    idle_threshold: int = 120
    interval_min: int = 180
    interval_jitter: int = 240
    smoothing: float = 0.015


@dataclass
class CreepyConfig:
    # Pupil twitch
    shake_cooldown: int = 180
    shake_chance: float = 0.03
    shake_min: float = 1.5
    shake_max: float = 3.5
    shake_decay: float = 0.9
    # Falling drops
    drop_interval: int = 80
    drop_chance: float = 0.12
    drop_decay: float = 0.996
    drop_min_alpha: int = 10
    drop_offscreen_margin: int = 50
    # Static streaks
    trail_chance: float = 0.015
    trail_decay: float = 0.985
    trail_min_alpha: int = 20


@dataclass
class Config:
    window: WindowConfig = field(default_factory=WindowConfig)
    eyes: EyeConfig = field(default_factory=EyeConfig)
    gestures: GestureConfig = field(default_factory=GestureConfig)
    wander: WanderConfig = field(default_factory=WanderConfig)
    creepy: CreepyConfig = field(default_factory=CreepyConfig)
    log_level: str = "INFO"


def _override(section, data: dict, name: str):
    """Return a copy of a config section with the keys present in data replaced."""
    known = {f.name: f for f in dataclasses.fields(section)}
    changes = {}
    for key, value in data.items():
        if key not in known:
            log.warning(f"Ignoring unknown config key: {name}.{key}")
            continue
        current = getattr(section, key)
        if isinstance(current, tuple) and isinstance(value, list):
            value = tuple(value)
        changes[key] = value
    return dataclasses.replace(section, **changes)


def load_config(path: str = "config.yaml") -> Config:
    """Load config from YAML file, falling back to defaults for missing keys."""
    config = Config()
    config_path = Path(path)

    if not config_path.exists():
        return config

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    for name in ("window", "eyes", "gestures", "wander", "creepy"):
        if name in data:
            section = _override(getattr(config, name), data[name] or {}, name)
            setattr(config, name, section)

    if "logging" in data:
        config.log_level = (data["logging"] or {}).get("level", config.log_level)

    return config
