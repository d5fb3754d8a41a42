import pytest

from keepwarden.animation import Animation


def test_starts_at_first_frame():
    anim = Animation([4, 5, 6], True)
    assert anim.current_frame() == 4
    assert anim.spf == 0.42
    assert not anim.is_finished()


def test_advances_after_one_frame_time():
    anim = Animation([4, 5, 6], True, 0.5)
    anim.update(0.25)
    assert anim.current_frame() == 4
    anim.update(0.25)
    assert anim.current_frame() == 5


def test_looping_wraps_and_never_finishes():
    anim = Animation([4, 5, 6], True, 0.5)
    for _ in range(3):
        anim.update(0.5)
    assert anim.current_frame() == 4
    assert not anim.is_finished()


def test_non_looping_finishes_on_last_frame():
    anim = Animation([4, 5, 6], False, 0.5)
    anim.update(1.0)
    assert anim.current_frame() == 6
    assert not anim.is_finished()
    anim.update(0.5)
    assert anim.is_finished()
    anim.update(5.0)
    assert anim.current_frame() == 6


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        Animation([], True)