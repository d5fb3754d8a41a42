import random

from keepwarden.tower_spawn import TowerSpawn, TowerSpawnRing


class Thing:
    def __init__(self, x, y, ring=None):
        self.x = x
        self.y = y
        self.ring = ring
        self.alive = True

    def is_alive(self):
        return self.alive


def make_ring(locations=((10.0, 0.0), (0.0, 10.0), (-10.0, 0.0)), seed=1):
    made = []

    def factory(x, y, ring):
        thing = Thing(x, y, ring)
        made.append(thing)
        return thing

    ring = TowerSpawnRing(locations, factory, (100.0, 50.0), random.Random(seed))
    return ring, made


def test_new_ring_is_empty():
    ring, _ = make_ring()
    assert ring.has_empty() is True
    assert all(not loc.occupied for loc in ring.locations)


def test_assign_tower_at_matching_site():
    ring, _ = make_ring(locations=[(10.0, 0.0)])
    tower = Thing(110.0, 50.0)
    assert ring.assign_tower(tower) is True
    assert ring.locations[0].tower is tower
    assert ring.has_empty() is False


def test_assign_tower_elsewhere_is_ignored():
    ring, _ = make_ring(locations=[(10.0, 0.0)])
    assert ring.assign_tower(Thing(0.0, 0.0)) is False
    assert ring.has_empty() is True


def test_dead_tower_frees_site():
    ring, _ = make_ring(locations=[(10.0, 0.0)])
    tower = Thing(110.0, 50.0)
    ring.assign_tower(tower)
    tower.alive = False
    ring.update(0.1)
    assert ring.locations[0].tower is None
    assert ring.has_empty() is True


def test_spawn_places_offer_at_free_site():
    ring, made = make_ring()
    offer = ring.spawn_add_tower()
    assert made == [offer]
    assert offer.ring is ring
    holders = [loc for loc in ring.locations if loc.add_tower is offer]
    assert len(holders) == 1
    loc = holders[0]
    assert (offer.x, offer.y) == (ring.center[0] + loc.x, ring.center[1] + loc.y)


def test_spawn_fills_every_site_then_stops():
    ring, made = make_ring()
    offers = [ring.spawn_add_tower() for _ in range(len(ring.locations))]
    assert len({id(o) for o in offers}) == len(ring.locations)
    assert ring.spawn_add_tower() is None
    assert len(made) == len(ring.locations)


def test_dead_offer_is_cleared():
    ring, _ = make_ring(locations=[(1.0, 1.0)])
    offer = ring.spawn_add_tower()
    offer.alive = False
    ring.update(0.0)
    assert ring.locations[0].add_tower is None
    assert ring.spawn_add_tower() is not offer


def test_tower_spawn_ring_sizes():
    spawn = TowerSpawn(lambda x, y, ring: Thing(x, y, ring), rng=random.Random(2))
    assert [len(r.locations) for r in spawn.rings] == [8, 16]
    assert 4.0 <= spawn.interval <= 6.0


def test_outer_ring_surrounds_inner():
    spawn = TowerSpawn(lambda x, y, ring: Thing(x, y, ring), rng=random.Random(2))
    inner = max(abs(c) for loc in spawn.rings[0].locations for c in (loc.x, loc.y))
    outer = max(abs(c) for loc in spawn.rings[1].locations for c in (loc.x, loc.y))
    assert outer > inner


def test_timer_offers_in_inner_ring_first():
    made = []

    def factory(x, y, ring):
        thing = Thing(x, y, ring)
        made.append(thing)
        return thing

    spawn = TowerSpawn(factory, center=(400.0, 300.0), rng=random.Random(5))
    spawn.update(spawn.interval / 2)
    assert made == []
    spawn.update(spawn.interval)
    assert len(made) == 1
    assert made[0].ring is spawn.rings[0]