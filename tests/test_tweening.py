import math

import pytest

from keepwarden.tweening import (
    back,
    bounce,
    chain,
    circ,
    cubic,
    elastic,
    expo,
    linear,
    out,
    quad,
    quart,
    quint,
    sine,
    tween_value,
)

CURVES = [quad, cubic, quart, quint, sine, circ]
CURVE_NAMES = ["quad", "cubic", "quart", "quint", "sine", "circ"]


def test_linear_is_identity():
    assert linear(0.3, {}) == 0.3


@pytest.mark.parametrize("name", CURVE_NAMES)
def test_curves_start_at_zero_and_end_at_one(name):
    assert tween_value("in-" + name, 0.0) == pytest.approx(0.0)
    assert tween_value("in-" + name, 1.0) == pytest.approx(1.0)


def test_expo_ends_at_one():
    assert expo(1.0, {}) == pytest.approx(1.0)


def test_cubic_is_quad_times_linear():
    for s in (0.1, 0.4, 0.9):
        assert cubic(s, {}) == pytest.approx(quad(s, {}) * linear(s, {}))


@pytest.mark.parametrize("curve", CURVES)
def test_out_twice_is_identity(curve):
    for s in (0.2, 0.5, 0.7):
        assert out(out(curve))(s, {}) == pytest.approx(curve(s, {}))


@pytest.mark.parametrize("name", ["quad", "cubic", "sine"])
def test_in_out_is_symmetric(name):
    for s in (0.1, 0.3, 0.45):
        total = tween_value("in-out-" + name, s) + tween_value("in-out-" + name, 1 - s)
        assert total == pytest.approx(1.0)


def test_in_out_midpoint():
    assert tween_value("in-out-quad", 0.5) == pytest.approx(0.5)


def test_chain_matches_in_out():
    for s in (0.2, 0.8):
        assert chain(quad, out(quad))(s, {}) == pytest.approx(tween_value("in-out-quad", s))
        assert chain(out(quad), quad)(s, {}) == pytest.approx(tween_value("out-in-quad", s))


def test_prefixed_methods_dispatch():
    assert tween_value("in-quad", 0.3) == pytest.approx(quad(0.3, {}))
    assert tween_value("out-cubic", 0.3) == pytest.approx(out(cubic)(0.3, {}))
    assert tween_value("linear", 0.3) == 0.3


def test_unknown_prefix_gives_zero():
    assert tween_value("sideways-quad", 0.7) == 0.0


def test_unknown_curve_raises():
    with pytest.raises(ValueError):
        tween_value("in-wobble", 0.5)


def test_back_without_bounciness_is_cubic():
    assert back(0.6, {}) == pytest.approx(cubic(0.6, {}))
    assert back(1.0, {"bounciness": 1.70158}) == pytest.approx(1.0)


def test_bounce_endpoints():
    assert bounce(0.0, {}) == pytest.approx(0.0)
    assert bounce(1.0, {}) == pytest.approx(1.0)


def test_elastic_ends_at_one_with_defaults():
    assert elastic(1.0, {}) == pytest.approx(1.0)
    assert math.isfinite(elastic(0.5, {"amp": 2, "period": 0.5}))