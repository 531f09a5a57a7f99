"""The powerline-light theme: bright backgrounds with light text."""

from __future__ import annotations

from ccline.models import (
    Color16,
    ColorConfig,
    IconConfig,
    Rgb,
    SegmentConfig,
    SegmentId,
    TextStyleConfig,
)

_WHITE = Rgb(255, 255, 255)


def _segment(segment_id, enabled, plain, nerd_font, foreground, background, options=None):
    return SegmentConfig(
        id=segment_id,
        enabled=enabled,
        icon=IconConfig(plain=plain, nerd_font=nerd_font),
        colors=ColorConfig(icon=foreground, text=foreground, background=background),
        styles=TextStyleConfig(),
        options=options or {},
    )


def segments() -> list[SegmentConfig]:
    """The theme's segments, in display order."""
    return [
        _segment(SegmentId.MODEL, True, "🤖", "\ue26d", Rgb(0, 0, 0), Rgb(135, 206, 235)),
        _segment(SegmentId.DIRECTORY, True, "📁", "\U000f024b", _WHITE, Rgb(255, 107, 71)),
        _segment(
            SegmentId.GIT, True, "🌿", "\U000f02a2", _WHITE, Rgb(79, 179, 217),
            options={"show_sha": False},
        ),
        _segment(
            SegmentId.CONTEXT_WINDOW, True, "⚡️", "\uf49b", _WHITE, Rgb(107, 114, 128)
        ),
        _segment(
            SegmentId.USAGE, False, "📊", "\U000f0a9e", Color16(14), None,
            options={
                "api_base_url": "https://api.anthropic.com",
                "cache_duration": 180,
                "timeout": 2,
            },
        ),
        _segment(SegmentId.COST, False, "💰", "\ueec1", _WHITE, Rgb(255, 193, 7)),
        _segment(SegmentId.SESSION, False, "⏱️", "\U000f19bb", _WHITE, Rgb(40, 167, 69)),
        _segment(
            SegmentId.OUTPUT_STYLE, False, "🎯", "\U000f12f5", _WHITE, Rgb(32, 201, 151)
        ),
    ]