import numpy as np
import pytest

from boxpic.analyzer import HUE_SATURATION_BRIGHTNESS, PixelAnalyzer
from boxpic.canvas import StringCanvas
from boxpic.colourize import CccTerminalColourizer, NullColourizer
from boxpic.context import RenderContext, RenderOptions
from boxpic.frame import ASCII_FRAME, DEFAULT_FRAME
from boxpic.palette import BOOLEAN, HALVES, QUADRANTS, SEXTANTS, SHADES, PixelPalette
from boxpic.renderer import DEFAULT_RENDERER, Renderer, render
from boxpic.source import ArraySource
from tests.conftest import BLACK, WHITE

NBSP = "\u00a0"


def block_index(source, palette, options=None, colourizer=None):
    context = RenderContext(Renderer(), StringCanvas(), source, palette, options=options)
    context.colourizer = colourizer
    return DEFAULT_RENDERER.calculate_box_index(context)


class RecordingColourizer(NullColourizer):
    """Logs every hook call and marks the glyph boundaries on the canvas."""

    def __init__(self, context, answer=None):
        self.context = context
        self.answer = answer
        self.calls = []
        self.brightnesses = []

    def before_row(self):
        self.calls.append("before_row")
        self.context.canvas.append("[")

    def after_row(self):
        self.calls.append("after_row")
        self.context.canvas.append("]")

    def open_block(self):
        self.calls.append(f"open_block({self.context.x},{self.context.y})")

    def process_sub_pixel(self, dx, dy, pixel, is_set, brightness):
        self.calls.append(f"sub_pixel({dx},{dy})")
        self.brightnesses.append(brightness)
        return self.answer

    def before_glyph(self):
        self.calls.append("before_glyph")
        self.context.canvas.append("<")

    def after_glyph(self):
        self.calls.append("after_glyph")
        self.context.canvas.append(">")

    def close_block(self):
        self.calls.append("close_block")


def test_white_halves_render_full_glyph(make_source):
    source = make_source([[WHITE], [WHITE]])
    assert render(source, HALVES) == "█\n"


def test_top_left_quadrant(make_source):
    source = make_source([[WHITE, BLACK], [BLACK, BLACK]])
    assert render(source, QUADRANTS) == "▘\n"


def test_empty_source_with_frame_renders_only_borders(make_source):
    assert render(make_source([]), QUADRANTS, frame=DEFAULT_FRAME) == "╔╗\n╚╝\n"


def test_empty_source_without_frame_renders_nothing(make_source):
    assert render(make_source([]), QUADRANTS) == ""


def zero_width_source():
    return ArraySource(np.zeros((4, 0, 3), dtype=np.uint8))


def test_zero_width_source_renders_nothing():
    assert render(zero_width_source(), QUADRANTS) == ""


def test_zero_width_source_with_frame_renders_only_borders():
    assert render(zero_width_source(), QUADRANTS, frame=ASCII_FRAME) == "++\n++\n"


def test_zero_width_source_emits_no_colour_codes():
    result = render(zero_width_source(), QUADRANTS, frame=ASCII_FRAME, colourizer_factory=CccTerminalColourizer)
    assert result == "++\n++\n"


def test_rendering_is_deterministic(make_source):
    rng = np.random.default_rng(42)
    source = make_source(rng.integers(0, 256, size=(9, 7, 3)).tolist())
    first = render(source, SEXTANTS, frame=DEFAULT_FRAME)
    second = render(source, SEXTANTS, frame=DEFAULT_FRAME)
    assert first == second


def test_black_block_resolves_to_empty(make_source):
    source = make_source([[BLACK, BLACK], [BLACK, BLACK]])
    assert block_index(source, QUADRANTS) == 0
    assert render(source, QUADRANTS) == NBSP + "\n"


def test_empty_and_full_overrides(make_source):
    source = make_source([[BLACK, WHITE]])
    options = RenderOptions(empty_character=" ", full_character="#")
    assert render(source, BOOLEAN, options=options) == " #\n"


def test_white_block_resolves_to_last_index(make_source):
    source = make_source([[WHITE, WHITE], [WHITE, WHITE]])
    assert block_index(source, QUADRANTS) == len(QUADRANTS) - 1


@pytest.mark.parametrize("palette", [HALVES, QUADRANTS, SEXTANTS])
def test_each_sub_pixel_sets_its_own_bit(make_source, palette):
    for dy in range(palette.pixel_height):
        for dx in range(palette.pixel_width):
            rows = [[BLACK] * palette.pixel_width for _ in range(palette.pixel_height)]
            rows[dy][dx] = WHITE
            expected = 1 << (palette.pixel_width * dy + dx)
            assert block_index(make_source(rows), palette) == expected


def test_partial_blocks_at_edges(make_source):
    source = make_source([[WHITE, WHITE, WHITE]])
    assert render(source, QUADRANTS) == "▀▘\n"


def test_frame_width_counts_partial_blocks(make_source):
    source = make_source([[WHITE, WHITE, WHITE]])
    assert render(source, QUADRANTS, frame=ASCII_FRAME) == "+--+\n|▀▘|\n+--+\n"


def test_multiple_rows(make_source):
    source = make_source([[WHITE, BLACK], [BLACK, BLACK], [BLACK, BLACK], [BLACK, WHITE]])
    assert render(source, QUADRANTS) == "▘\n▗\n"


def test_shades_follow_average_brightness(make_source):
    options = RenderOptions(analyzer=HUE_SATURATION_BRIGHTNESS)
    source = make_source([[BLACK, (153, 153, 153), (200, 200, 200), WHITE]])
    assert render(source, SHADES, options=options) == NBSP + "▒▓█\n"


@pytest.mark.parametrize(
    "row, expected",
    [
        ([WHITE, BLACK], 1),
        ([BLACK, WHITE], 4),
        ([WHITE, (204, 204, 204)], 8),
        ([WHITE, WHITE], 9),
    ],
)
def test_shaded_index_scales_bit_pattern(make_source, row, expected):
    # (bits - 1) * shades + int(average * shades), with 3 shades per pattern
    palette = PixelPalette(2, 1, 3, "0123456789")
    options = RenderOptions(analyzer=HUE_SATURATION_BRIGHTNESS)
    assert block_index(make_source([row]), palette, options) == expected


def test_shaded_index_skips_shading_when_nothing_is_set(make_source):
    # Dim but non-zero: not set, so the index stays 0
    options = RenderOptions(analyzer=HUE_SATURATION_BRIGHTNESS)
    assert block_index(make_source([[(100, 100, 100)]]), SHADES, options) == 0


def test_custom_analyzer_is_used(make_source):
    options = RenderOptions(analyzer=PixelAnalyzer(lambda pixel: pixel.r / 255))
    source = make_source([[(255, 0, 0), (0, 255, 255)]])
    assert render(source, BOOLEAN, options=options) == "█" + NBSP + "\n"


def test_hook_order(make_source):
    source = make_source([[WHITE, BLACK], [WHITE, BLACK]])
    colourizers = []

    def factory(context):
        colourizers.append(RecordingColourizer(context))
        return colourizers[-1]

    result = render(source, HALVES, frame=ASCII_FRAME, colourizer_factory=factory)

    assert result == "+--+\n|[<█><" + NBSP + ">]|\n+--+\n"
    assert len(colourizers) == 1
    assert colourizers[0].calls == [
        "before_row",
        "open_block(0,0)",
        "sub_pixel(0,0)",
        "sub_pixel(0,1)",
        "before_glyph",
        "after_glyph",
        "close_block",
        "open_block(1,0)",
        "sub_pixel(0,0)",
        "sub_pixel(0,1)",
        "before_glyph",
        "after_glyph",
        "close_block",
        "after_row",
    ]


def test_hooks_skip_out_of_bounds_sub_pixels(make_source):
    source = make_source([[WHITE, WHITE, WHITE]])
    colourizer = None

    def factory(context):
        nonlocal colourizer
        colourizer = RecordingColourizer(context)
        return colourizer

    render(source, QUADRANTS, colourizer_factory=factory)
    assert [call for call in colourizer.calls if call.startswith("sub_pixel")] == [
        "sub_pixel(0,0)",
        "sub_pixel(1,0)",
        "sub_pixel(0,0)",
    ]


def test_hooks_not_called_for_empty_source(make_source):
    colourizer = None

    def factory(context):
        nonlocal colourizer
        colourizer = RecordingColourizer(context)
        return colourizer

    assert render(make_source([]), QUADRANTS, colourizer_factory=factory) == ""
    assert colourizer.calls == []


def test_factory_receives_the_render_context(make_source):
    source = make_source([[WHITE]])
    seen = []

    def factory(context):
        seen.append(context)
        return NullColourizer()

    render(source, BOOLEAN, colourizer_factory=factory)
    render(source, BOOLEAN, colourizer_factory=factory)
    assert len(seen) == 2
    assert seen[0] is not seen[1]
    assert seen[0].source is source
    assert seen[0].palette is BOOLEAN
    assert seen[0].frame_width == 1


@pytest.mark.parametrize("answer", [True, np.True_])
def test_colourizer_can_force_sub_pixels_set(make_source, answer):
    source = make_source([[BLACK, BLACK], [BLACK, BLACK]])
    assert block_index(source, QUADRANTS, colourizer=RecordingColourizer(None, answer)) == 15


@pytest.mark.parametrize("answer", [None, "yes", 1, 0.0])
def test_colourizer_non_boolean_answer_leaves_sub_pixels_unchanged(make_source, answer):
    source = make_source([[WHITE, BLACK], [BLACK, BLACK]])
    assert block_index(source, QUADRANTS, colourizer=RecordingColourizer(None, answer)) == 1


def test_colourizer_can_clear_sub_pixels(make_source):
    source = make_source([[WHITE, WHITE], [WHITE, WHITE]])
    assert block_index(source, QUADRANTS, colourizer=RecordingColourizer(None, False)) == 0


def test_brightness_is_clamped_before_reaching_hooks(make_source):
    options = RenderOptions(analyzer=PixelAnalyzer(lambda pixel: 2.0 if pixel.r else -1.0))
    colourizer = RecordingColourizer(None)
    block_index(make_source([[WHITE, BLACK]]), QUADRANTS, options, colourizer)
    assert colourizer.brightnesses == [1.0, 0.0]


def test_render_appends_to_existing_canvas(make_source):
    canvas = StringCanvas()
    canvas.append("> ")
    DEFAULT_RENDERER.render(make_source([[WHITE]]), canvas, BOOLEAN)
    assert canvas.result() == "> █\n"
