import math
from unittest.mock import MagicMock

import pygame
import pytest

from conftest import make_target
from tweenline.binding import PHANTOM_PROPERTY
from tweenline.easing import EASING_FUNCTIONS
from tweenline.errors import InvalidDuration, PropertyNotFound, ShapeMismatch, UnsupportedValueType
from tweenline.tween import BoundTween, DriveMode, StandaloneTween, Tween, TweenState


def test_scenario_progress_and_completion():
    target = {"x": 0}
    done = MagicMock()
    tw = Tween(target, "x", 10, 2, "linear", on_complete=done).start()
    assert tw.state is TweenState.ACTIVE
    tw.set_progress(0.5)
    assert target["x"] == 5
    assert math.isclose(tw.elapsed, 1.0)
    result = tw.set_progress(1)
    assert target["x"] == 10
    assert result.completed
    assert tw.state is TweenState.COMPLETED
    done.assert_called_once()
    assert tw.set_progress(1) is None
    done.assert_called_once()


def test_tween_named_ease():
    target = make_target(v=0)
    tw = Tween(target, "v", 1, 1, ease="ease-out-cubic").start()
    tw.set_progress(0.5)
    assert math.isclose(target.v, EASING_FUNCTIONS["ease-out-cubic"](0.5))


def test_tween_callable_ease():
    target = make_target(v=0)
    tw = Tween(target, "v", 1, 1, ease=lambda t: t * t).start()
    tw.set_progress(0.5)
    assert math.isclose(target.v, 0.25)


def test_unknown_ease_raises():
    with pytest.raises(KeyError):
        Tween(make_target(v=0), "v", 1, 1, ease="nope")


@pytest.mark.parametrize("duration", [0, -1, float("nan")])
def test_invalid_duration(duration):
    with pytest.raises(InvalidDuration):
        Tween(make_target(v=0), "v", 1, duration)


def test_exact_end_value_despite_overshoot_easing():
    target = make_target(v=0.1)
    tw = Tween(target, "v", 0.7, 1, "ease-out-back").start()
    tw.set_progress(0.9)
    assert target.v > 0.7
    tw.set_progress(1.0)
    assert target.v == 0.7


def test_progress_callback_receives_value_and_ratio():
    seen = []
    target = make_target(v=0)
    tw = Tween(target, "v", 4, 2).on_progress(lambda v, p: seen.append((v, p))).start()
    tw.set_progress(0.25)
    tw.set_progress(1)
    assert seen == [(1, 0.25), (4, 1.0)]


def test_progress_is_clamped():
    target = make_target(v=0)
    tw = Tween(target, "v", 10, 1).start()
    tw.set_progress(-1)
    assert target.v == 0
    tw.set_progress(3)
    assert target.v == 10
    assert tw.finished


def test_missing_property_leaves_tween_inert():
    errors = []
    target = make_target()
    tw = Tween(target, "nothing", 1, 1).on_failure(errors.append).start()
    assert tw.state is TweenState.UNSTARTED
    assert isinstance(tw.error, PropertyNotFound)
    assert errors == [tw.error]
    assert tw.set_progress(0.5) is None
    assert not hasattr(target, "nothing")


def test_mismatched_kinds_fail_at_start_not_construction():
    target = make_target(v=0, pts=[1, 2])
    tw = Tween(target, "v", "#fff", 1)
    assert tw.error is None
    tw.start()
    assert isinstance(tw.error, UnsupportedValueType)
    shape = Tween(target, "pts", [1, 2, 3], 1).start()
    assert isinstance(shape.error, ShapeMismatch)
    assert target.pts == [1, 2]


def test_failure_is_logged(caplog):
    with caplog.at_level("ERROR", logger="tweenline"):
        Tween(make_target(), "gone", 1, 1).start()
    assert "gone" in caplog.text


def test_restart_after_completion_recaptures():
    target = make_target(v=0)
    tw = Tween(target, "v", 10, 1).start()
    tw.set_progress(1)
    target.v = 20
    tw.start()
    assert tw.state is TweenState.ACTIVE
    assert tw.start_value == 20
    tw.set_progress(0.5)
    assert target.v == 15


def test_reset_to_start_restores_snapshot():
    target = make_target(pos=pygame.math.Vector2(0, 0))
    tw = Tween(target, "pos", pygame.math.Vector2(10, 10), 1).start()
    tw.set_progress(0.5)
    assert target.pos == pygame.math.Vector2(5, 5)
    tw.reset_to_start()
    assert target.pos == pygame.math.Vector2(0, 0)
    assert tw.state is TweenState.UNSTARTED
    assert tw.elapsed == 0
    # The snapshot is not aliased by the written value
    target.pos.x = 3
    tw.reset_to_start()
    assert target.pos.x == 0


def test_color_tween_writes_normalised_strings():
    target = {"style": {"fill": "#000"}}
    tw = Tween(target, "style.fill", "#ffffff", 1).start()
    tw.set_progress(0.5)
    assert target["style"]["fill"] == "rgba(128,128,128,1)"
    tw.set_progress(1)
    assert target["style"]["fill"] == "#ffffff"


def test_record_completion_merges_end_keys():
    style = {"width": 1, "fill": "#000", "font": "serif"}
    target = make_target(style=style)
    end = {"width": 5, "fill": "#fff", "font": "mono", "dash": 2}
    tw = Tween(target, "style", end, 1).start()
    tw.set_progress(0.5)
    assert target.style["width"] == 3
    assert target.style["font"] == "serif"
    assert "dash" not in target.style
    tw.set_progress(1)
    assert target.style == {"width": 5, "fill": "#fff", "font": "mono", "dash": 2}
    tw.reset_to_start()
    assert target.style == {"width": 1, "fill": "#000", "font": "serif"}


def test_point_list_tween():
    V = pygame.math.Vector2
    target = make_target(points=[V(0, 0), V(1, 1)])
    tw = Tween(target, "points", [V(2, 2), V(3, 3)], 1).start()
    tw.set_progress(0.5)
    assert target.points == [V(1, 1), V(2, 2)]


def test_phantom_tween_drives_callbacks_only():
    values = []
    done = MagicMock()
    tw = Tween(None, PHANTOM_PROPERTY, 1, 1, "ease-in-quad", on_complete=done)
    tw.on_progress(lambda v, p: values.append(v)).start()
    assert tw.state is TweenState.ACTIVE
    tw.set_progress(0.5)
    tw.set_progress(1)
    assert values == [0.25, 1.0]
    done.assert_called_once()


def test_write_failure_makes_tween_inert():
    target = make_target(box={"w": 1})
    tw = Tween(target, "box.w", 2, 1).start()
    target.box = None
    assert tw.set_progress(0.5) is None
    assert isinstance(tw.error, PropertyNotFound)
    assert tw.state is TweenState.UNSTARTED


def test_drive_modes():
    target = make_target(v=0)
    assert Tween(target, "v", 1, 1).drive_mode is DriveMode.BOUND
    assert BoundTween(target, "v", 1, 1).drive_mode is DriveMode.BOUND
    assert StandaloneTween(target, "v", 1, 1).drive_mode is DriveMode.STANDALONE
    assert not hasattr(BoundTween(target, "v", 1, 1), "update")


def test_standalone_update_accumulates():
    target = make_target(v=0)
    done = MagicMock()
    tw = StandaloneTween(target, "v", 1, 0.1, on_complete=done)
    assert tw.update(0.05) is None
    tw.start()
    tw.update(0.05)
    assert math.isclose(target.v, 0.5)
    tw.update(0.05)
    assert target.v == 1
    assert tw.finished
    tw.update(0.05)
    done.assert_called_once()


def test_standalone_start_registers_with_manager():
    manager = MagicMock()
    tw = StandaloneTween(make_target(v=0), "v", 1, 1, manager=manager)
    tw.start()
    manager.add_tween.assert_called_once_with(tw)


def test_overshooting_color_tween_leaves_parseable_value():
    target = make_target(fill="#ffffff")
    tw = Tween(target, "fill", "#000000", 1, "ease-in-back").start()
    tw.set_progress(0.2)
    assert target.fill == "rgba(255,255,255,1)"
    follow = Tween(target, "fill", "#ff0000", 1).start()
    assert follow.error is None
    assert follow.is_active
