"""Slider style configuration and JSON config file loading."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from betterslider.constants import (
    DEFAULT_HANDLE_SIZE,
    DEFAULT_TRACK_HEIGHT,
    STEP_MARKER_HEIGHT_RATIO,
)
from betterslider.core.mapping import Geometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SliderStyle:
    """Styling knobs handed to the host's rendering layer."""
    track_height: float = DEFAULT_TRACK_HEIGHT
    handle_size: float = DEFAULT_HANDLE_SIZE
    # Height of the step markers; None means a fraction of the handle size
    step_height: Optional[float] = None
    # Markers are only drawn when a step is configured
    show_steps: bool = False
    haptic_feedback: bool = False

    # camelCase aliases accepted in config files
    _CAMEL_KEY_MAP = {
        "sliderTrackHeight": "track_height",
        "sliderHandleSize": "handle_size",
        "sliderStepHeight": "step_height",
        "showSliderStep": "show_steps",
        "hapticFeedback": "haptic_feedback",
        "hapticFeedbackEnabled": "haptic_feedback",
    }

    def __post_init__(self):
        for name in ("track_height", "handle_size"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.step_height is not None and self.step_height < 0:
            raise ValueError(f"step_height must be non-negative, got {self.step_height}")

    @property
    def marker_height(self) -> float:
        if self.step_height is not None:
            return self.step_height
        return self.handle_size * STEP_MARKER_HEIGHT_RATIO

    @property
    def frame_height(self) -> float:
        """Height the slider needs: the tallest of handle, track and markers."""
        return max(self.handle_size, self.track_height, self.step_height or 0.0)

    def geometry(self, track_width: float) -> Geometry:
        return Geometry(track_width=track_width, handle_size=self.handle_size)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SliderStyle:
        """Build a style from snake_case or camelCase keys; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = cls._CAMEL_KEY_MAP.get(key, key)
            if name not in known:
                logger.warning("Ignoring unknown slider style key: %s", key)
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_json(path: Path) -> Any:
    """Load and return parsed JSON from a file."""
    with open(path) as f:
        return json.load(f)


def load_style(path: Path) -> SliderStyle:
    """Load a :class:`SliderStyle` from a JSON object file."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Slider style config must be a JSON object: {path}")
    return SliderStyle.from_dict(data)
