from .easing import EASING_FUNCTIONS, get_easing, register_easing
from .errors import (
    TweenError, PropertyNotFound, UnsupportedValueType, ShapeMismatch, InvalidDuration,
)
from .values import Category, classify, interpolate, parse_color, format_color
from .binding import PHANTOM_PROPERTY, PropertyBinding
from .tween import Tween, BoundTween, StandaloneTween, TweenState, DriveMode, TweenUpdate
from .timeline import Timeline, TimelineEntry, TimelineEvent, EventKind
from .config import AnimationOptions, load_options, save_options
from .anim_manager import AnimationManager
from .driver import FrameDriver
from .log import logger, configure_logging

__all__ = [
    'EASING_FUNCTIONS', 'get_easing', 'register_easing',
    'TweenError', 'PropertyNotFound', 'UnsupportedValueType', 'ShapeMismatch',
    'InvalidDuration',
    'Category', 'classify', 'interpolate', 'parse_color', 'format_color',
    'PHANTOM_PROPERTY', 'PropertyBinding',
    'Tween', 'BoundTween', 'StandaloneTween', 'TweenState', 'DriveMode', 'TweenUpdate',
    'Timeline', 'TimelineEntry', 'TimelineEvent', 'EventKind',
    'AnimationOptions', 'load_options', 'save_options',
    'AnimationManager', 'FrameDriver',
    'logger', 'configure_logging',
]
