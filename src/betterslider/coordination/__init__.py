"""Slider controllers -- gesture handling for single-value and range sliders."""

from betterslider.coordination.feedback import SensoryFeedback
from betterslider.coordination.range_controller import (
    RangeController,
    clamp_selection_to_bounds,
    minimum_gap,
)
from betterslider.coordination.slider_controller import SliderController

__all__ = [
    "RangeController",
    "SensoryFeedback",
    "SliderController",
    "clamp_selection_to_bounds",
    "minimum_gap",
]
