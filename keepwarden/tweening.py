"""Easing curves and the named tween methods used by the timer."""

from __future__ import annotations

import math
from typing import Callable, Mapping, Optional

Args = Optional[Mapping[str, float]]
Easing = Callable[[float, Args], float]


def _arg(args: Args, name: str) -> float:
    if not args:
        return 0.0
    return float(args.get(name, 0.0))


def linear(x: float, args: Args = None) -> float:
    """Identity curve."""
    return x


def quad(x: float, args: Args = None) -> float:
    """Quadratic ease-in."""
    return x * x


def cubic(x: float, args: Args = None) -> float:
    """Cubic ease-in."""
    return x * x * x


def quart(x: float, args: Args = None) -> float:
    """Quartic ease-in."""
    return x * x * x * x


def quint(x: float, args: Args = None) -> float:
    """Quintic ease-in."""
    return x * x * x * x * x


def sine(x: float, args: Args = None) -> float:
    """Sinusoidal ease-in."""
    return 1 - math.cos(x * math.pi / 2)


def expo(x: float, args: Args = None) -> float:
    """Exponential ease-in."""
    return math.pow(2, 10 * (x - 1))


def circ(x: float, args: Args = None) -> float:
    """Circular ease-in."""
    return 1 - math.sqrt(1 - x * x)


def back(s: float, args: Args = None) -> float:
    """Ease-in that overshoots backwards by ``args['bounciness']``."""
    bounciness = _arg(args, "bounciness")
    return s * s * ((bounciness + 1) * s - bounciness)


def bounce(s: float, args: Args = None) -> float:
    """Bouncing ease curve."""
    a = 7.5625
    b = 1 / 2.75
    return min(
        min(a * s**2, a * (s - 1.5 * b) ** 2 + 0.75),
        min(a * (s - 2.25 * b) ** 2 + 0.9375, a * (s - 2.625 * b) ** 2 + 0.984375),
    )


def elastic(s: float, args: Args = None) -> float:
    """Elastic ease-in driven by ``args['amp']`` and ``args['period']``."""
    amp = _arg(args, "amp")
    period = _arg(args, "period")
    amp = amp if amp > 1 else 1.0
    period = period if period != 0 else 0.3
    return (
        -amp * math.sin(2 * math.pi / period * (s - 1) - math.asin(1 / amp))
    ) * math.pow(2, 10 * (s - 1))


def chain(f1: Easing, f2: Easing) -> Easing:
    """Run ``f1`` over the first half and ``f2`` over the second half."""

    def chained(s: float, args: Args = None) -> float:
        return (f1(2 * s, args) if s < 0.5 else 1 + f2(2 * s - 1, args)) * 0.5

    return chained


def out(f: Easing) -> Easing:
    """Mirror an ease-in curve into an ease-out curve."""

    def reversed_curve(s: float, args: Args = None) -> float:
        return 1 - f(1 - s, args)

    return reversed_curve


_EASINGS: dict[str, Easing] = {
    "elastic": elastic,
    "bounce": bounce,
    "back": back,
    "expo": expo,
    "quad": quad,
    "cubic": cubic,
    "quart": quart,
    "quint": quint,
    "sine": sine,
    "circ": circ,
}


def _easing(name: str) -> Easing:
    try:
        return _EASINGS[name]
    except KeyError:
        raise ValueError(f"unknown easing function: {name!r}") from None


def tween_value(method: str, s: float, args: Args = None) -> float:
    """Evaluate a named tween method such as ``"in-out-quad"`` at progress ``s``.

    Methods with an unrecognised prefix evaluate to 0.0; a recognised prefix
    with an unknown curve name raises ValueError.
    """
    if method == "linear":
        return linear(s, args)
    if method.startswith("in-out"):
        f = _easing(method[7:])
        return chain(f, out(f))(s, args)
    if method.startswith("out-in"):
        f = _easing(method[7:])
        return chain(out(f), f)(s, args)
    if method.startswith("out-"):
        return out(_easing(method[4:]))(s, args)
    if method.startswith("in-"):
        return _easing(method[3:])(s, args)
    return 0.0