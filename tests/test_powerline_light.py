from ccline.models import (
    Color16,
    Config,
    Rgb,
    SegmentId,
    StyleConfig,
    StyleMode,
)
from ccline.themes.powerline_light import segments


def test_segment_order():
    assert [s.id for s in segments()] == [
        SegmentId.MODEL,
        SegmentId.DIRECTORY,
        SegmentId.GIT,
        SegmentId.CONTEXT_WINDOW,
        SegmentId.USAGE,
        SegmentId.COST,
        SegmentId.SESSION,
        SegmentId.OUTPUT_STYLE,
    ]


def test_enabled_flags():
    enabled = {s.id for s in segments() if s.enabled}
    assert enabled == {
        SegmentId.MODEL,
        SegmentId.DIRECTORY,
        SegmentId.GIT,
        SegmentId.CONTEXT_WINDOW,
    }


def test_model_colours():
    model = segments()[0]
    assert model.colors.icon == Rgb(0, 0, 0)
    assert model.colors.text == Rgb(0, 0, 0)
    assert model.colors.background == Rgb(135, 206, 235)
    assert model.icon.nerd_font == "\ue26d"


def test_backgrounds():
    by_id = {s.id: s for s in segments()}
    assert by_id[SegmentId.DIRECTORY].colors.background == Rgb(255, 107, 71)
    assert by_id[SegmentId.COST].colors.background == Rgb(255, 193, 7)
    assert by_id[SegmentId.USAGE].colors.background is None
    assert by_id[SegmentId.USAGE].colors.icon == Color16(14)


def test_no_segment_is_bold():
    assert not any(s.styles.text_bold for s in segments())


def test_options():
    by_id = {s.id: s for s in segments()}
    assert by_id[SegmentId.GIT].options == {"show_sha": False}
    assert by_id[SegmentId.USAGE].options["cache_duration"] == 180
    assert by_id[SegmentId.USAGE].options["timeout"] == 2
    assert by_id[SegmentId.MODEL].options == {}


def test_fresh_lists_are_independent():
    first = segments()
    first[2].options["show_sha"] = True
    assert segments()[2].options == {"show_sha": False}


def test_round_trip_through_dict():
    config = Config(
        style=StyleConfig(mode=StyleMode.NERD_FONT, separator="\ue0b0"),
        segments=segments(),
        theme="powerline-light",
    )
    assert Config.from_dict(config.to_dict()) == config