from ccline.models import Rgb, SegmentId
from ccline.themes.powerline_rose_pine import segments

ORDER = [
    SegmentId.MODEL,
    SegmentId.DIRECTORY,
    SegmentId.GIT,
    SegmentId.CONTEXT_WINDOW,
    SegmentId.USAGE,
    SegmentId.COST,
    SegmentId.SESSION,
    SegmentId.OUTPUT_STYLE,
]


def _by_id():
    return {segment.id: segment for segment in segments()}


def test_segment_order():
    assert [segment.id for segment in segments()] == ORDER


def test_first_four_enabled_rest_disabled():
    assert [segment.enabled for segment in segments()] == [True] * 4 + [False] * 4


def test_icon_and_text_colours_match():
    for segment in segments():
        assert segment.colors.icon == segment.colors.text


def test_backgrounds_present_except_usage():
    for segment in segments():
        if segment.id is SegmentId.USAGE:
            assert segment.colors.background is None
        else:
            assert isinstance(segment.colors.background, Rgb)


def test_model_colours():
    model = _by_id()[SegmentId.MODEL]
    assert model.colors.icon == Rgb(235, 188, 186)
    assert model.icon.nerd_font == "\ue26d"


def test_git_and_usage_options():
    by_id = _by_id()
    assert by_id[SegmentId.GIT].options == {"show_sha": False}
    assert by_id[SegmentId.USAGE].options["api_base_url"] == "https://api.anthropic.com"


def test_not_bold():
    assert not any(segment.styles.text_bold for segment in segments())


def test_fresh_lists_each_call():
    first = segments()
    first[0].options["x"] = 1
    assert segments()[0].options == {}