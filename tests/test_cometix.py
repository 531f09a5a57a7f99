from ccline.models import Color16, Config, SegmentId, StyleConfig, StyleMode
from ccline.themes.cometix import segments


def _by_id():
    return {segment.id: segment for segment in segments()}


def test_order():
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


def test_bold_except_usage():
    for segment in segments():
        assert segment.styles.text_bold is (segment.id is not SegmentId.USAGE)


def test_model_colours_and_icons():
    model = _by_id()[SegmentId.MODEL]
    assert model.colors.icon == Color16(14)
    assert model.colors.text == model.colors.icon
    assert model.colors.background is None
    assert model.current_icon(StyleMode.NERD_FONT) == "\ue26d"


def test_directory_uses_distinct_colours():
    directory = _by_id()[SegmentId.DIRECTORY]
    assert directory.colors.icon == Color16(11)
    assert directory.colors.text == Color16(10)


def test_options():
    by_id = _by_id()
    assert by_id[SegmentId.GIT].options == {"show_sha": False}
    usage = by_id[SegmentId.USAGE].options
    assert usage["api_base_url"] == "https://api.anthropic.com"
    assert usage["cache_duration"] == 180
    assert by_id[SegmentId.COST].options == {}


def test_fresh_list_each_call():
    first = segments()
    first[0].enabled = False
    first[2].options["show_sha"] = True
    second = segments()
    assert second[0].enabled is True
    assert second[2].options["show_sha"] is False


def test_round_trip_in_config():
    config = Config(StyleConfig(StyleMode.NERD_FONT, " | "), segments(), "cometix")
    assert Config.from_dict(config.to_dict()) == config