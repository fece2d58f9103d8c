import math

import pytest

from atomblaster_ui.boss_intro import (
    FINAL_TEXT,
    INTRO_TEXT,
    MIDDLE_TEXT,
    SCIENTIST_COUNT,
    SCIENTIST_RADIUS,
    BossIntroAnimation,
)
from atomblaster_ui.controllers import Key
from atomblaster_ui.util import distance, Vector2


def _run_until(anim, progress, dt=0.02):
    while anim.progress() < progress:
        anim.update(dt)
    return anim


def _center(anim):
    return Vector2(float(anim.screen_width // 2), float(anim.screen_height // 2))


def test_scientists_form_circle():
    anim = BossIntroAnimation()
    assert len(anim.scientists) == SCIENTIST_COUNT
    center = _center(anim)
    for sci in anim.scientists:
        assert distance(sci.pos, center) == pytest.approx(SCIENTIST_RADIUS)
        assert not sci.dead
        assert sci.death_timer == 0


def test_start_positions_offscreen():
    anim = BossIntroAnimation()
    center = _center(anim)
    assert anim.boss_pos == Vector2(center.x, -50.0)
    assert anim.player_pos == Vector2(-50.0, center.y + 150)


def test_invalid_duration_rejected():
    with pytest.raises(ValueError):
        BossIntroAnimation(duration=0)


def test_progress_tracks_timer():
    anim = BossIntroAnimation(duration=8.0)
    anim.update(2.0)
    assert anim.progress() == pytest.approx(0.25)


def test_boss_descends_in_first_phase():
    anim = BossIntroAnimation()
    start_x = anim.boss_pos.x
    previous_y = anim.boss_pos.y
    for _ in range(10):
        anim.update(0.1)
        assert anim.boss_pos.x == start_x
        assert anim.boss_pos.y > previous_y
        previous_y = anim.boss_pos.y


def test_intro_caption_fades_in_and_caps():
    anim = BossIntroAnimation()
    anim.update(0.1)
    first = anim.caption()
    assert first.text == INTRO_TEXT
    anim.update(1.0)
    second = anim.caption()
    assert second.alpha > first.alpha
    assert second.alpha == 1.0


def test_no_caption_between_phases():
    anim = _run_until(BossIntroAnimation(), 0.33)
    assert anim.progress() < 0.4
    assert anim.caption() is None


def test_middle_caption_full_alpha():
    anim = _run_until(BossIntroAnimation(), 0.55)
    caption = anim.caption()
    assert caption.text == MIDDLE_TEXT
    assert caption.alpha == 1.0


def test_boss_circles_center_in_middle_phase():
    anim = _run_until(BossIntroAnimation(), 0.5)
    center = _center(anim)
    dx = (anim.boss_pos.x - center.x) / 120
    dy = (anim.boss_pos.y - center.y) / 80
    assert math.hypot(dx, dy) <= 1.0 + 1e-9


def test_scientists_killed_with_explosions():
    anim = _run_until(BossIntroAnimation(), 0.5)
    dying = [s for s in anim.scientists if s.dying]
    assert dying
    assert anim.explosions
    for exp in anim.explosions:
        assert 0 <= exp.size <= exp.max_size


def test_final_phase_prompt_and_caption():
    anim = _run_until(BossIntroAnimation(), 0.95)
    caption = anim.caption()
    assert caption.text == FINAL_TEXT
    assert 0.0 <= caption.alpha <= 1.0
    assert anim.show_prompt
    assert 0.0 <= anim.prompt_alpha() <= 1.0
    assert anim.player_pos.x > -50.0


def test_enter_ignored_before_prompt():
    anim = BossIntroAnimation()
    anim.update(0.5)
    assert anim.handle_input([Key.ENTER]) is False
    assert anim.handle_input([]) is False


def test_escape_skips_any_time():
    anim = BossIntroAnimation()
    assert anim.handle_input([Key.ESCAPE]) is True


def test_enter_accepted_after_duration():
    anim = BossIntroAnimation(duration=2.0)
    anim.anim_timer = 2.0
    assert anim.handle_input([Key.ENTER]) is True
    assert anim.show_prompt