from ccline.models import Color256, Config, SegmentId, StyleConfig, StyleMode
from ccline.themes.gruvbox import segments


def _by_id():
    return {segment.id: segment for segment in segments()}


def test_order_and_uniqueness():
    ids = [s.id for s in segments()]
    assert len(ids) == len(set(ids))
    assert ids[0] is SegmentId.MODEL
    assert ids[-1] is SegmentId.OUTPUT_STYLE
    assert SegmentId.UPDATE not in ids


def test_gruvbox_palette():
    by_id = _by_id()
    assert by_id[SegmentId.MODEL].colors.icon == Color256(208)
    assert by_id[SegmentId.DIRECTORY].colors.text == Color256(142)
    assert by_id[SegmentId.GIT].colors.icon == Color256(109)
    assert by_id[SegmentId.COST].colors.text == Color256(214)


def test_icon_and_text_colours_match():
    for segment in segments():
        assert segment.colors.icon == segment.colors.text
        assert segment.colors.background is None


def test_session_matches_directory_colour():
    by_id = _by_id()
    assert by_id[SegmentId.SESSION].colors.icon == by_id[SegmentId.DIRECTORY].colors.icon


def test_bold_except_usage():
    for segment in segments():
        assert segment.styles.text_bold is (segment.id is not SegmentId.USAGE)


def test_git_options():
    assert _by_id()[SegmentId.GIT].options == {"show_sha": False}


def test_plain_icons():
    by_id = _by_id()
    assert by_id[SegmentId.GIT].current_icon(StyleMode.PLAIN) == "🌿"
    assert by_id[SegmentId.COST].current_icon(StyleMode.PLAIN) == "💰"


def test_round_trip_in_config():
    config = Config(StyleConfig(StyleMode.NERD_FONT, " | "), segments(), "gruvbox")
    assert Config.from_dict(config.to_dict()) == config