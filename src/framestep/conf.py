"""Viewer settings and config persistence for framestep.

Config is stored at ~/.config/framestep/config.json (XDG-compliant).
Only viewer preferences live there; playback position is never saved.

Usage:
    from framestep.conf import get_settings

    settings = get_settings()
    settings.window_name      # HighGUI window title
    settings.default_fps      # pacing when the container reports no rate
    settings.overlay_color    # BGR caption color

    # Low-level config access
    from framestep.conf import load_config, save_config
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional, Tuple

from .constants import (
    DEFAULT_FPS,
    DEFAULT_WINDOW_NAME,
    OVERLAY_COLOR,
    OVERLAY_ORIGIN,
    OVERLAY_SCALE,
    OVERLAY_THICKNESS,
)

log = logging.getLogger(__name__)

# =========================================================================
# Config file location (XDG-compliant)
# =========================================================================

_XDG_CONFIG = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
CONFIG_DIR = os.path.join(_XDG_CONFIG, 'framestep')
CONFIG_PATH = os.path.join(CONFIG_DIR, 'config.json')


# =========================================================================
# Low-level config persistence
# =========================================================================

def load_config(path: Optional[str] = None) -> dict:
    """Load user config from disk. Returns empty dict on missing/corrupt file."""
    path = path or CONFIG_PATH
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def save_config(config: dict, path: Optional[str] = None):
    """Save user config to disk."""
    path = path or CONFIG_PATH
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w') as f:
        json.dump(config, f, indent=2)


# =========================================================================
# Settings
# =========================================================================

def _color(value) -> Tuple[int, int, int]:
    if (not isinstance(value, (list, tuple)) or len(value) != 3
            or not all(isinstance(c, int) and 0 <= c <= 255 for c in value)):
        raise ValueError(f"overlay_color must be three 0-255 ints, got {value!r}")
    return tuple(value)


def _point(value) -> Tuple[int, int]:
    if (not isinstance(value, (list, tuple)) or len(value) != 2
            or not all(isinstance(c, int) for c in value)):
        raise ValueError(f"overlay_origin must be two ints, got {value!r}")
    return tuple(value)


def _positive(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"{name} must be a positive number, got {value!r}")
    return value


@dataclass
class Settings:
    """Viewer preferences. Defaults reproduce the classic viewer look."""
    window_name: str = DEFAULT_WINDOW_NAME
    default_fps: float = DEFAULT_FPS
    overlay_color: Tuple[int, int, int] = OVERLAY_COLOR
    overlay_scale: float = OVERLAY_SCALE
    overlay_thickness: int = OVERLAY_THICKNESS
    overlay_origin: Tuple[int, int] = OVERLAY_ORIGIN
    show_overlay: bool = True
    print_progress: bool = True

    @classmethod
    def from_config(cls, config: dict) -> Settings:
        """Build settings from a config dict.

        Unknown keys are ignored; invalid values raise ValueError.
        """
        known = {f.name for f in fields(cls)}
        for key in config:
            if key not in known:
                log.debug("Unknown config key ignored: %s", key)
        s = cls()
        if 'window_name' in config:
            if not isinstance(config['window_name'], str) or not config['window_name']:
                raise ValueError("window_name must be a non-empty string")
            s.window_name = config['window_name']
        if 'default_fps' in config:
            s.default_fps = float(_positive('default_fps', config['default_fps']))
        if 'overlay_color' in config:
            s.overlay_color = _color(config['overlay_color'])
        if 'overlay_scale' in config:
            s.overlay_scale = float(_positive('overlay_scale', config['overlay_scale']))
        if 'overlay_thickness' in config:
            value = config['overlay_thickness']
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"overlay_thickness must be a positive int, got {value!r}")
            s.overlay_thickness = value
        if 'overlay_origin' in config:
            s.overlay_origin = _point(config['overlay_origin'])
        for flag in ('show_overlay', 'print_progress'):
            if flag in config:
                if not isinstance(config[flag], bool):
                    raise ValueError(f"{flag} must be true or false")
                setattr(s, flag, config[flag])
        return s

    @classmethod
    def load(cls, path: Optional[str] = None) -> Settings:
        return cls.from_config(load_config(path))

    def to_config(self) -> dict:
        data = asdict(self)
        data['overlay_color'] = list(self.overlay_color)
        data['overlay_origin'] = list(self.overlay_origin)
        return data

    def save(self, path: Optional[str] = None) -> None:
        save_config(self.to_config(), path)
        log.info("Settings written to %s", path or CONFIG_PATH)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide settings, loaded from CONFIG_PATH on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
