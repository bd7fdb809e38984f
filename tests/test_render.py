# tests/test_render.py
from dungeonmaze.config import StageConfig
from dungeonmaze.grid import Grid
from dungeonmaze.mapgen.generator import generate_stage
from dungeonmaze.render.glyphs import (
    arms_for_mask, glyph_at, glyph_for_mask, render_ascii, render_unicode
)
from dungeonmaze.tiles import GLYPHS, OPEN, UNKNOWN

def test_glyph_lookup_matches_table():
    for mask in range(16):
        assert glyph_for_mask(mask) == GLYPHS[format(mask, "04b")]

def test_out_of_domain_mask_is_unknown():
    assert glyph_for_mask(16) == UNKNOWN
    assert glyph_for_mask(-1) == UNKNOWN

def test_solid_block():
    assert render_unicode(Grid.solid(3, 3)) == "┏┳┓\n┣╋┫\n┗┻┛\n"

def test_ring_around_open_cell():
    g = Grid.solid(3, 3)
    g.carve(2, 2)
    assert glyph_at(g, 2, 2) == OPEN
    assert render_unicode(g) == "┏━┓\n┃ ┃\n┗━┛\n"
    assert render_ascii(g) == "###\n# #\n###\n"

def test_isolated_pillar():
    g = Grid.solid(3, 3)
    for t in g.tiles():
        if (t.x, t.y) != (2, 2):
            t.empty = True
    assert glyph_at(g, 2, 2) == "╋"
    assert sorted(arms_for_mask(0)) == sorted([(0, -1), (1, 0), (0, 1), (-1, 0)])

def test_arms_follow_mask_bits():
    assert arms_for_mask(0b0101) == [(1, 0), (-1, 0)]
    assert arms_for_mask(0b1000) == [(0, -1)]

def test_output_shape_and_idempotence():
    stage = generate_stage(StageConfig(width=41, height=15, room_fill_rate=30, seed=8))
    first = render_unicode(stage.grid)
    lines = first.split("\n")
    assert lines[-1] == ""
    assert len(lines) - 1 == 15
    assert all(len(line) == 41 for line in lines[:-1])
    assert UNKNOWN not in first
    # rendering does not disturb the grid
    assert render_unicode(stage.grid) == first
    assert render_unicode(stage.grid.copy()) == first
