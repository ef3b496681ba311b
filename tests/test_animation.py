import pytest

from kombatecs.animation import (
    CHAR_SQUARE_HEIGHT,
    CHAR_SQUARE_WIDTH,
    DEMO_SEQUENCE,
    NEXT_FRAME_OFFSET,
    SCALE_CHARACTER,
    SHADOW_OFFSET,
    SUBZERO,
    SUBZERO_SPRITE,
    Action,
    Rect,
    Sequence,
    SpriteInfo,
    demo_frames,
    get_frame,
)


def test_sprite_table_covers_every_action():
    looked_up = [SUBZERO.sprite(action) for action in Action]
    assert len(looked_up) == len(SUBZERO_SPRITE)
    assert looked_up == list(SUBZERO_SPRITE)


def test_stance_first_frame_matches_table():
    assert get_frame(SUBZERO, Action.STANCE, 0) == Rect(32, 58, 230, 220)


def test_sprite_lookup_by_action():
    assert SUBZERO.sprite(Action.WALK) == SpriteInfo(9, 3074, 58)


def test_consecutive_frames_step_by_offset():
    first = get_frame(SUBZERO, Action.WALK, 0)
    second = get_frame(SUBZERO, Action.WALK, 1)
    assert second.x - first.x == NEXT_FRAME_OFFSET + CHAR_SQUARE_WIDTH
    assert second.y == first.y


@pytest.mark.parametrize("action", [Action.STANCE, Action.UPPERCUT_HIT, Action.WIN])
def test_frames_wrap_around(action):
    count = SUBZERO.sprite(action).frame_count
    assert get_frame(SUBZERO, action, count) == get_frame(SUBZERO, action, 0)
    assert get_frame(SUBZERO, action, count + 2) == get_frame(SUBZERO, action, 2)


def test_shadow_moves_down_one_row():
    plain = get_frame(SUBZERO, Action.HIGH_KICK, 3)
    shadow = get_frame(SUBZERO, Action.HIGH_KICK, 3, shadow=True)
    assert shadow.y - plain.y == SHADOW_OFFSET + CHAR_SQUARE_HEIGHT
    assert shadow.x == plain.x


def test_frame_size_is_fixed():
    rect = get_frame(SUBZERO, Action.ROLL, 4)
    assert (rect.w, rect.h) == (CHAR_SQUARE_WIDTH, CHAR_SQUARE_HEIGHT)


@pytest.mark.parametrize("action", [Action.SPECIAL_3, Action.FINISH_HIM])
def test_actions_without_frames_raise(action):
    with pytest.raises(ValueError):
        get_frame(SUBZERO, action, 0)


def test_demo_yields_one_pair_per_tick():
    frames = list(demo_frames(DEMO_SEQUENCE))
    assert len(frames) == sum(step.frames for step in DEMO_SEQUENCE)


def test_demo_destination_size_is_scaled():
    for _, dest in demo_frames(DEMO_SEQUENCE):
        assert dest.w == pytest.approx(CHAR_SQUARE_WIDTH * SCALE_CHARACTER)
        assert dest.h == pytest.approx(CHAR_SQUARE_HEIGHT * SCALE_CHARACTER)


def test_stance_keeps_position():
    frames = list(demo_frames([Sequence(Action.STANCE, 4)], 50, 60))
    assert {dest.x for _, dest in frames} == {50}
    assert {dest.y for _, dest in frames} == {60}


def test_walk_forward_moves_right_each_tick():
    frames = list(demo_frames([Sequence(Action.WALK, 5)], 100, 0))
    xs = [dest.x for _, dest in frames]
    assert all(b - a == 3 for a, b in zip(xs, xs[1:]))
    assert xs[0] > 100


def test_walk_back_reverses_frames_and_direction():
    forward = [src for src, _ in demo_frames([Sequence(Action.WALK, 6)])]
    backward_pairs = list(demo_frames([Sequence(Action.WALK, 6, False, True)], 100, 0))
    assert [src for src, _ in backward_pairs] == forward[::-1]
    xs = [dest.x for _, dest in backward_pairs]
    assert all(b < a for a, b in zip(xs, xs[1:]))


def test_walk_forward_then_back_returns_home():
    steps = [Sequence(Action.WALK, 7), Sequence(Action.WALK, 7, False, True)]
    *_, (_, last) = demo_frames(steps, 40, 0)
    assert last.x == 40


def test_torso_hit_pushes_left():
    xs = [dest.x for _, dest in demo_frames([Sequence(Action.TORSO_HIT, 3)], 10, 0)]
    assert all(b < a for a, b in zip(xs, xs[1:]))
    assert xs[0] < 10


def test_uppercut_hit_holds_last_frame():
    count = SUBZERO.sprite(Action.UPPERCUT_HIT).frame_count
    frames = [src for src, _ in demo_frames([Sequence(Action.UPPERCUT_HIT, count + 3)])]
    last = get_frame(SUBZERO, Action.UPPERCUT_HIT, count - 1)
    assert frames[count - 1:] == [last] * 4
    assert frames[0] == get_frame(SUBZERO, Action.UPPERCUT_HIT, 0)