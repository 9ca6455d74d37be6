"""
test_balloon.py
---------------
Tests for balloon spawning, motion, bouncing, hit testing, the popping
state machine and rendering.
"""

import math

import pytest

from balloon_pop.core.runtime.game_settings import BalloonShape, Bounds
from balloon_pop.core.services.event_manager import EVENT_BALLOON_POPPED, BalloonPoppedEvent
from balloon_pop.entities.balloon import Balloon
from balloon_pop.entities.balloon_types import BalloonType
from balloon_pop.entities.entity_state import LifecycleState


# ===========================================================
# Spawning
# ===========================================================

def test_spawns_below_bottom_edge(canvas, events, variants, rng):
    for _ in range(50):
        b = Balloon((255, 0, 0), canvas, events, variants[BalloonType.NORMAL], rng=rng)
        assert b.pos.y == canvas.height + b.size.y
        assert b.size.x <= b.pos.x <= canvas.width - b.size.x
        assert -BalloonShape.RISE_SPEED - BalloonShape.SPEED_JITTER <= b.velocity.y
        assert b.velocity.y <= -BalloonShape.RISE_SPEED + BalloonShape.SPEED_JITTER
        assert abs(b.velocity.x) <= BalloonShape.SPEED_JITTER
        assert b.lifecycle == LifecycleState.ALIVE


def test_speedup_variant_rises_faster(canvas, events, variants, scripted_rng):
    normal = Balloon((0, 0, 0), canvas, events, variants[BalloonType.NORMAL], rng=scripted_rng([0.5]))
    fast = Balloon((0, 0, 0), canvas, events, variants[BalloonType.SPEEDUP], rng=scripted_rng([0.5]))
    assert fast.velocity.y < normal.velocity.y


def test_popping_fields_come_from_variant(make_balloon, variants):
    bomb = make_balloon(BalloonType.BOMB)
    variant = variants[BalloonType.BOMB]
    assert bomb.balloon_type == BalloonType.BOMB
    assert bomb.popping_timer == variant.popping_time
    assert bomb.popping_rate == variant.popping_rate
    assert not bomb.popping


# ===========================================================
# Motion
# ===========================================================

def test_update_moves_by_velocity_and_multiplier(make_balloon):
    b = make_balloon(x=250, y=300, vx=4, vy=-80)

    b.update(500, speed_multiplier=1.5)

    assert b.pos.x == pytest.approx(250 + 4 * 0.75)
    assert b.pos.y == pytest.approx(300 - 80 * 0.75)


def test_zero_dt_does_not_move(make_balloon):
    b = make_balloon(x=100, y=100, vx=5, vy=-75)
    b.update(0)
    assert tuple(b.pos) == (100, 100)


def test_bounces_once_off_right_edge(make_balloon, canvas):
    b = make_balloon(x=canvas.width - 10, y=300, vx=6, vy=0)

    b.update(16)
    assert b.velocity.x == -6

    # Still overlapping the edge but now moving inward: no second flip
    b.update(16)
    assert b.velocity.x == -6


def test_bounces_once_off_left_edge(make_balloon):
    b = make_balloon(x=10, y=300, vx=-6, vy=0)

    b.update(16)
    assert b.velocity.x == 6
    b.update(16)
    assert b.velocity.x == 6


def test_no_bounce_inside_canvas(make_balloon):
    b = make_balloon(x=250, y=300, vx=-6, vy=0)
    b.update(16)
    assert b.velocity.x == -6


# ===========================================================
# Popping State Machine
# ===========================================================

def test_explode_publishes_once(make_balloon, events):
    received = []
    events.subscribe(EVENT_BALLOON_POPPED, received.append)
    b = make_balloon(vx=3, vy=-70)

    b.explode()
    b.explode()

    assert b.popping
    assert tuple(b.velocity) == (0, 0)
    assert b.lifecycle == LifecycleState.POPPING
    assert received == []

    events.flush()
    assert received == [BalloonPoppedEvent(b)]


def test_popping_grows_then_expires(make_balloon, variants):
    b = make_balloon(BalloonType.NORMAL)
    variant = variants[BalloonType.NORMAL]
    start = b.size.x
    b.explode()

    b.update(100)
    assert b.size.x == pytest.approx(start + variant.popping_rate * 0.1)
    assert not b.is_removable()

    b.update(100)
    assert b.popping_timer < 0
    assert b.is_removable()
    assert b.lifecycle == LifecycleState.REMOVED


def test_popping_timer_never_increases(make_balloon):
    b = make_balloon(BalloonType.BOMB)
    b.explode()

    previous = b.popping_timer
    for dt in (0, 16, 0, 33, 16, 16, 50):
        b.update(dt)
        assert b.popping_timer <= previous
        previous = b.popping_timer


def test_size_stops_growing_after_timer_expires(make_balloon):
    b = make_balloon(BalloonType.BOMB)
    b.explode()
    b.update(100)
    grown = b.size.x

    b.update(100)
    assert b.size.x == grown


def test_popping_balloon_stays_put(make_balloon):
    b = make_balloon(x=200, y=200, vx=5, vy=-75)
    b.explode()
    b.update(50, speed_multiplier=2.0)
    assert tuple(b.pos) == (200, 200)


def test_removable_after_leaving_top(make_balloon):
    b = make_balloon(x=250, y=0)
    b.pos.y = -b.size.y - Bounds.OFFSCREEN_MARGIN
    assert not b.is_removable()

    b.pos.y -= 1
    assert b.is_removable()
    assert b.lifecycle == LifecycleState.REMOVED


# ===========================================================
# Hit Testing
# ===========================================================

def test_centre_always_hits(make_balloon):
    b = make_balloon(x=123, y=456)
    assert b.check_hit((123, 456))


def test_hit_margin(make_balloon):
    b = make_balloon(x=250, y=300)
    rx = b.size.x + Bounds.HIT_MARGIN
    assert b.check_hit((250 + rx - 0.5, 300))
    assert not b.check_hit((250 + rx + 0.5, 300))
    assert b.check_hit((250, 300 - b.size.y - 1))


@pytest.mark.parametrize("angle", [i * math.pi / 8 for i in range(16)])
def test_hit_is_symmetric_about_centre(make_balloon, angle):
    b = make_balloon(x=250, y=300)
    for radius in (10, 30, 36, 39, 45):
        dx, dy = radius * math.cos(angle), radius * math.sin(angle)
        assert b.check_hit((250 + dx, 300 + dy)) == b.check_hit((250 - dx, 300 - dy))
        assert b.check_hit((250 + dx, 300 + dy)) == b.check_hit((250 - dx, 300 + dy))


# ===========================================================
# Rendering
# ===========================================================

def test_draw_fills_body(make_balloon, canvas):
    surface = canvas.get_context()
    canvas.clear()
    b = make_balloon(x=250, y=300, color=(51, 102, 255))

    b.draw(surface)
    assert surface.get_at((250, 300 + 20))[:3] == (51, 102, 255)


def test_bomb_has_dark_core(make_balloon, canvas):
    from balloon_pop.core.runtime.game_settings import Colors

    surface = canvas.get_context()
    canvas.clear()
    make_balloon(BalloonType.BOMB, x=250, y=300).draw(surface)
    assert surface.get_at((250, 300))[:3] == tuple(Colors.BOMB_MARK)[:3]


def test_removable_balloon_draws_nothing(make_balloon, canvas):
    surface = canvas.get_context()
    canvas.clear()
    before = surface.get_at((250, 300))

    b = make_balloon(x=250, y=300)
    b.explode()
    b.popping_timer = -1
    b.draw(surface)
    assert surface.get_at((250, 300)) == before
