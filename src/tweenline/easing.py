from __future__ import annotations

import math
from typing import Callable, Dict

BACK_OVERSHOOT = 1.70158
BOUNCE_COEFFICIENT = 7.5625


def linear(t: float) -> float:
    """Linear easing."""
    return t


def smooth(t: float) -> float:
    """Smoothstep easing for gentle ease-in/out."""
    return t * t * (3 - 2 * t)


# Polynomial ---------------------------------------------------------------
def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out curve."""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return (t - 1) * (2 * t - 2) * (2 * t - 2) + 1


def ease_in_quart(t: float) -> float:
    return t ** 4


def ease_out_quart(t: float) -> float:
    return 1 - (t - 1) ** 4


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8 * t ** 4
    return 1 - 8 * (t - 1) ** 4


def ease_in_quint(t: float) -> float:
    return t ** 5


def ease_out_quint(t: float) -> float:
    return 1 + (t - 1) ** 5


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16 * t ** 5
    return 1 + 16 * (t - 1) ** 5


# Sine and circular --------------------------------------------------------
def ease_in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def ease_out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - (t - 1) ** 2)


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - 4 * t * t)) / 2
    return (math.sqrt(1 - (-2 * t + 2) ** 2) + 1) / 2


# Exponential --------------------------------------------------------------
def ease_in_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return math.pow(2, 10 * (t - 1))


def ease_out_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return 1 - math.pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return math.pow(2, 20 * t - 10) / 2
    return (2 - math.pow(2, -20 * t + 10)) / 2


# Back (overshoot) ---------------------------------------------------------
def ease_in_back(t: float, s: float = BACK_OVERSHOOT) -> float:
    """Pull back below 0 before accelerating towards 1."""
    return t * t * ((s + 1) * t - s)


def ease_out_back(t: float, s: float = BACK_OVERSHOOT) -> float:
    """Overshoot past 1 and settle back."""
    t -= 1
    return t * t * ((s + 1) * t + s) + 1


def ease_in_out_back(t: float, s: float = BACK_OVERSHOOT * 1.525) -> float:
    t *= 2
    if t < 1:
        return 0.5 * (t * t * ((s + 1) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1) * t + s) + 2)


# Elastic ------------------------------------------------------------------
def _elastic_shift(a: float, p: float) -> float:
    return p / (2 * math.pi) * math.asin(1 / a)


def ease_in_elastic(t: float, a: float = 1.0, p: float = 0.3) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    a = max(a, 1.0)
    s = _elastic_shift(a, p)
    t -= 1
    return -a * math.pow(2, 10 * t) * math.sin((t - s) * (2 * math.pi) / p)


def ease_out_elastic(t: float, a: float = 1.0, p: float = 0.3) -> float:
    """Elastic ease-out curve."""
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    a = max(a, 1.0)
    s = _elastic_shift(a, p)
    return a * math.pow(2, -10 * t) * math.sin((t - s) * (2 * math.pi) / p) + 1


def ease_in_out_elastic(t: float, a: float = 1.0, p: float = 0.45) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    a = max(a, 1.0)
    s = _elastic_shift(a, p)
    t = t * 2 - 1
    wave = math.sin((t - s) * (2 * math.pi) / p)
    if t < 0:
        return -0.5 * a * math.pow(2, 10 * t) * wave
    return a * math.pow(2, -10 * t) * wave * 0.5 + 1


# Bounce -------------------------------------------------------------------
def ease_out_bounce(t: float) -> float:
    n = BOUNCE_COEFFICIENT
    if t < 1 / 2.75:
        return n * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return n * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return n * t * t + 0.9375
    t -= 2.625 / 2.75
    return n * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return ease_in_bounce(t * 2) * 0.5
    return ease_out_bounce(t * 2 - 1) * 0.5 + 0.5


EASING_FUNCTIONS: Dict[str, Callable[..., float]] = {
    "linear": linear,
    "smooth": smooth,
    "ease-in-quad": ease_in_quad,
    "ease-out-quad": ease_out_quad,
    "ease-in-out-quad": ease_in_out_quad,
    "ease-in-cubic": ease_in_cubic,
    "ease-out-cubic": ease_out_cubic,
    "ease-in-out-cubic": ease_in_out_cubic,
    "ease-in-quart": ease_in_quart,
    "ease-out-quart": ease_out_quart,
    "ease-in-out-quart": ease_in_out_quart,
    "ease-in-quint": ease_in_quint,
    "ease-out-quint": ease_out_quint,
    "ease-in-out-quint": ease_in_out_quint,
    "ease-in-sine": ease_in_sine,
    "ease-out-sine": ease_out_sine,
    "ease-in-out-sine": ease_in_out_sine,
    "ease-in-circ": ease_in_circ,
    "ease-out-circ": ease_out_circ,
    "ease-in-out-circ": ease_in_out_circ,
    "ease-in-expo": ease_in_expo,
    "ease-out-expo": ease_out_expo,
    "ease-in-out-expo": ease_in_out_expo,
    "ease-in-back": ease_in_back,
    "ease-out-back": ease_out_back,
    "ease-in-out-back": ease_in_out_back,
    "ease-in-elastic": ease_in_elastic,
    "ease-out-elastic": ease_out_elastic,
    "ease-in-out-elastic": ease_in_out_elastic,
    "ease-in-bounce": ease_in_bounce,
    "ease-out-bounce": ease_out_bounce,
    "ease-in-out-bounce": ease_in_out_bounce,
    "elastic": ease_out_elastic,
}


def get_easing(ease: str | Callable[..., float] | None) -> Callable[..., float]:
    """Return the easing function named by ``ease``.

    Callables are returned unchanged and ``None`` selects :func:`linear`.
    Unknown names raise ``KeyError``.
    """
    if ease is None:
        return linear
    if isinstance(ease, str):
        if ease not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{ease}'")
        return EASING_FUNCTIONS[ease]
    if not callable(ease):
        raise TypeError(f"Easing must be a name or a callable, not {type(ease).__name__}")
    return ease


def register_easing(name: str, func: Callable[..., float]) -> None:
    """Add ``func`` to the registry under ``name``."""
    if not callable(func):
        raise TypeError("Easing functions must be callable")
    EASING_FUNCTIONS[name] = func


__all__ = [
    "linear",
    "smooth",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_in_quart",
    "ease_out_quart",
    "ease_in_out_quart",
    "ease_in_quint",
    "ease_out_quint",
    "ease_in_out_quint",
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_circ",
    "ease_out_circ",
    "ease_in_out_circ",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
    "ease_in_back",
    "ease_out_back",
    "ease_in_out_back",
    "ease_in_elastic",
    "ease_out_elastic",
    "ease_in_out_elastic",
    "ease_in_bounce",
    "ease_out_bounce",
    "ease_in_out_bounce",
    "BACK_OVERSHOOT",
    "BOUNCE_COEFFICIENT",
    "EASING_FUNCTIONS",
    "get_easing",
    "register_easing",
]
