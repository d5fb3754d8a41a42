import pytest

from keepwarden.property import PRODUCTION, ChanceList
from keepwarden.region import DEFAULT_PROPERTY_RINGS, Region


def make_region(**kwargs):
    kwargs.setdefault("chances", ChanceList({"BARREN": 1}))
    return Region(100.0, 200.0, 400.0, 300.0, 1.0, 2.0, 3.0, 4.0, **kwargs)


def test_default_ring_count():
    region = make_region()
    assert len(region.property_rings) == DEFAULT_PROPERTY_RINGS == 2
    assert [r.ring_no for r in region.property_rings] == [0, 1]
    assert all(r.region is region for r in region.property_rings)


def test_custom_ring_count():
    assert len(make_region(ring_count=3).property_rings) == 3


def test_health_fraction_scales_extent():
    region = make_region()
    region.set_health_fraction(0.5)
    assert region.current_width == region.width / 2
    assert region.current_height == region.height / 2
    region.set_health_fraction(1.0)
    assert (region.current_width, region.current_height) == (region.width, region.height)


def test_die():
    region = make_region()
    assert region.is_alive() is True
    region.die()
    assert region.is_alive() is False


def test_farms_feed_region():
    region = make_region(chances=ChanceList({"FARM": 1}))
    plots = sum(len(r.properties) for r in region.property_rings)
    cycle, amount = PRODUCTION["food"]
    region.update(cycle)
    assert region.food == pytest.approx(4.0 + plots * amount)
    assert region.gold == 1.0


def test_barren_region_stays_put():
    region = make_region()
    region.update(60.0)
    assert (region.gold, region.wood, region.stone, region.food) == (1.0, 2.0, 3.0, 4.0)