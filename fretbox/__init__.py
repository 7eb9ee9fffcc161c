from fretbox.aggregate import ShapeSet, aggregate_shapes
from fretbox.box import Coverage, FretWindow, StringPos
from fretbox.config import Config, init_config
from fretbox.navigator import ShapeNavigator
from fretbox.parser import parse_tuning
from fretbox.scale import KEY_LOOKUP, SCALE_LOOKUP, Key, Scale
from fretbox.shapes import Shape, generate_shapes
from fretbox.tuning import TUNING_LOOKUP, Tuning

__all__ = [
    "Config",
    "Coverage",
    "FretWindow",
    "KEY_LOOKUP",
    "Key",
    "SCALE_LOOKUP",
    "Scale",
    "Shape",
    "ShapeNavigator",
    "ShapeSet",
    "StringPos",
    "TUNING_LOOKUP",
    "Tuning",
    "aggregate_shapes",
    "generate_shapes",
    "init_config",
    "parse_tuning",
]
