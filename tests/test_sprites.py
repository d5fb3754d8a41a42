import pytest

from keepwarden.sprites import WHITE, Rect, SpriteHolder, SpriteSheet


def make_sheet(sprite_id="knight"):
    return SpriteSheet(sprite_id, texture_width=64, texture_height=32, width=16, height=16)


def make_holder(renderer=None):
    holder = SpriteHolder(renderer)
    holder.add(make_sheet())
    return holder


DEST = Rect(10.0, 20.0, 32.0, 32.0)


def test_frame_count_is_columns_times_rows():
    sheet = make_sheet()
    assert sheet.frame_count() == sheet.columns * sheet.rows
    assert sheet.columns * sheet.width <= sheet.texture_width


def test_source_rects_are_distinct_and_inside_texture():
    sheet = make_sheet()
    rects = [sheet.source_rect(i) for i in range(sheet.frame_count())]
    assert len(set(rects)) == len(rects)
    for r in rects:
        assert 0 <= r.x and r.x + r.width <= sheet.texture_width
        assert 0 <= r.y and r.y + r.height <= sheet.texture_height
        assert (r.width, r.height) == (sheet.width, sheet.height)


def test_first_frame_at_origin():
    assert make_sheet().source_rect(0) == Rect(0.0, 0.0, 16.0, 16.0)


def test_flipped_negates_width_only():
    sheet = make_sheet()
    plain = sheet.source_rect(3)
    flipped = sheet.source_rect(3, True)
    assert flipped.width == -plain.width
    assert (flipped.x, flipped.y, flipped.height) == (plain.x, plain.y, plain.height)


@pytest.mark.parametrize("bad", [-1, 8, 100])
def test_out_of_range_frames(bad):
    holder = make_holder()
    assert holder["knight"].source_rect(bad) is None
    assert holder.draw_sprite("knight", bad, DEST) is None
    assert holder.commands == []


def test_draw_sprite_records_command():
    holder = make_holder()
    cmd = holder.draw_sprite("knight", 2, DEST, flipped=True)
    assert holder.commands == [cmd]
    assert cmd.dest == DEST
    assert cmd.color == WHITE
    assert cmd.source == holder["knight"].source_rect(2, True)


def test_draw_with_color_passes_color():
    holder = make_holder()
    color = (1, 2, 3, 4)
    cmd = holder.draw_sprite_with_color("knight", 1, DEST, color, (5.0, 6.0), 45.0)
    assert cmd.color == color
    assert cmd.origin == (5.0, 6.0)
    assert cmd.rotation == 45.0


def test_draw_whole_uses_full_texture():
    holder = make_holder()
    cmd = holder.draw_whole("knight", DEST)
    assert cmd.source == Rect(0.0, 0.0, 64.0, 32.0)


def test_sprite_size_is_texture_size():
    assert make_holder().sprite_size("knight") == (64.0, 32.0)


def test_renderer_receives_commands():
    seen = []
    holder = make_holder(seen.append)
    cmd = holder.draw_sprite("knight", 0, DEST)
    assert seen == [cmd]
    assert holder.commands == []


def test_unknown_sprite_raises():
    holder = make_holder()
    with pytest.raises(KeyError):
        holder.draw_sprite("missing", 0, DEST)
    with pytest.raises(KeyError):
        holder.sprite_size("missing")


def test_first_registration_wins():
    holder = make_holder()
    holder.add(SpriteSheet("knight", 8, 8, 8, 8))
    assert holder.sprite_size("knight") == (64.0, 32.0)


def test_invalid_frame_size():
    with pytest.raises(ValueError):
        SpriteSheet("x", 64, 64, 0, 16)