from __future__ import annotations

import pytest

from rota.domain.animation import (
    FAST_OUT_SLOW_IN,
    AnimationPolicy,
    ColorAnimator,
    FieldAnimator,
    SpringSpec,
    TweenSpec,
    choose_spec,
    cubic_bezier,
    parse_hex,
    to_hex,
)


def test_fast_out_slow_in_endpoints_and_shape() -> None:
    assert FAST_OUT_SLOW_IN(0.0) == 0.0
    assert FAST_OUT_SLOW_IN(1.0) == 1.0
    assert FAST_OUT_SLOW_IN(0.5) > 0.5
    samples = [FAST_OUT_SLOW_IN(i / 20) for i in range(21)]
    assert samples == sorted(samples)


def test_linear_bezier_is_identity() -> None:
    ease = cubic_bezier(0.0, 0.0, 1.0, 1.0)
    assert ease(0.3) == pytest.approx(0.3, abs=1e-4)


def test_default_aware_policy_tweens_back_to_identity() -> None:
    tween, spring = TweenSpec(), SpringSpec()

    assert choose_spec(AnimationPolicy.DEFAULT_AWARE, 0.0, 0.0, tween=tween, spring=spring) is tween
    assert choose_spec(AnimationPolicy.DEFAULT_AWARE, 1.0, 1.0, tween=tween, spring=spring) is tween
    assert choose_spec(AnimationPolicy.DEFAULT_AWARE, 45.0, 0.0, tween=tween, spring=spring) is spring
    assert choose_spec(AnimationPolicy.UNIFORM, 0.0, 0.0, tween=tween, spring=spring) is spring


def test_tween_reaches_target_at_duration() -> None:
    animator = FieldAnimator(45.0, identity=0.0)

    assert animator.animate_to(0.0, now=10.0) is True
    assert isinstance(animator.motion_spec, TweenSpec)

    assert animator.value_at(10.0) == pytest.approx(45.0)
    midway = animator.value_at(10.25)
    assert 0.0 < midway < 45.0
    assert animator.is_running(10.25)

    assert animator.value_at(10.5) == 0.0
    assert not animator.is_running(10.5)
    assert animator.motion_spec is None


def test_spring_settles_on_target() -> None:
    animator = FieldAnimator(0.0, identity=0.0)
    animator.animate_to(45.0, now=0.0)

    assert isinstance(animator.motion_spec, SpringSpec)
    assert animator.value_at(0.0) == pytest.approx(0.0)
    assert 0.0 < animator.value_at(0.05) < 45.0
    assert animator.value_at(2.0) == 45.0
    assert not animator.is_running(2.0)


def test_uniform_policy_springs_to_identity() -> None:
    animator = FieldAnimator(45.0, identity=0.0, policy=AnimationPolicy.UNIFORM)
    animator.animate_to(0.0, now=0.0)

    assert isinstance(animator.motion_spec, SpringSpec)


def test_retarget_keeps_value_and_velocity_continuous() -> None:
    animator = FieldAnimator(0.0, identity=0.0)
    animator.animate_to(100.0, now=0.0)
    value_before = animator.value_at(0.05)
    velocity_before = animator.velocity_at(0.05)
    assert velocity_before > 0.0

    animator.animate_to(200.0, now=0.05)

    assert animator.target == 200.0
    assert animator.value_at(0.05) == pytest.approx(value_before)
    assert animator.velocity_at(0.05) == pytest.approx(velocity_before)


def test_retarget_to_same_target_is_noop() -> None:
    animator = FieldAnimator(0.0, identity=0.0)
    animator.animate_to(10.0, now=0.0)

    assert animator.animate_to(10.0, now=0.1) is False


def test_underdamped_spring_overshoots() -> None:
    animator = FieldAnimator(0.0, identity=0.0, spring=SpringSpec(damping_ratio=0.3, stiffness=200.0))
    animator.animate_to(100.0, now=0.0)

    peak = max(animator.value_at(i / 100) for i in range(1, 60))

    assert peak > 100.0


def test_overdamped_spring_converges_without_overshoot() -> None:
    animator = FieldAnimator(0.0, identity=0.0, spring=SpringSpec(damping_ratio=2.0, stiffness=400.0))
    animator.animate_to(100.0, now=0.0)

    samples = [animator.value_at(i / 50) for i in range(1, 50)]

    assert max(samples) <= 100.0
    assert animator.value_at(10.0) == 100.0


def test_spec_validation() -> None:
    with pytest.raises(ValueError):
        TweenSpec(duration_ms=-1)
    with pytest.raises(ValueError):
        SpringSpec(stiffness=0)
    with pytest.raises(ValueError):
        SpringSpec(damping_ratio=-1)


def test_color_animator_tweens_between_hex_colors() -> None:
    tint = ColorAnimator("#000000", TweenSpec(duration_ms=1000))

    assert tint.animate_to("#ffffff", now=0.0) is True
    assert tint.value_at(0.0) == "#000000"
    assert tint.value_at(0.5) not in {"#000000", "#ffffff"}
    assert tint.is_running(0.5)
    assert tint.value_at(1.0) == "#ffffff"
    assert not tint.is_running(1.0)


def test_hex_helpers() -> None:
    assert parse_hex("#abc") == (170, 187, 204)
    assert to_hex((36, 87, 255)) == "#2457ff"
    with pytest.raises(ValueError):
        parse_hex("#12")
    with pytest.raises(ValueError):
        parse_hex("#zzzzzz")
