"""The powerline-rose-pine theme: Rosé Pine colours on dark backgrounds."""

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

_FOAM = Rgb(156, 207, 216)
_OVERLAY = Rgb(38, 35, 58)


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
        _segment(
            SegmentId.MODEL, True, "🤖", "\ue26d", Rgb(235, 188, 186), Rgb(25, 23, 36)
        ),
        _segment(
            SegmentId.DIRECTORY, True, "📁", "\U000f024b", Rgb(196, 167, 231), _OVERLAY
        ),
        _segment(
            SegmentId.GIT, True, "🌿", "\U000f02a2", _FOAM, Rgb(31, 29, 46),
            options={"show_sha": False},
        ),
        _segment(
            SegmentId.CONTEXT_WINDOW, True, "⚡️", "\uf49b",
            Rgb(224, 222, 244), Rgb(82, 79, 103),
        ),
        _segment(
            SegmentId.USAGE, False, "📊", "\U000f0a9e", Color16(14), None,
            options={
                "api_base_url": "https://api.anthropic.com",
                "cache_duration": 180,
                "timeout": 2,
            },
        ),
        _segment(
            SegmentId.COST, False, "💰", "\ueec1", Rgb(246, 193, 119), Rgb(35, 33, 54)
        ),
        _segment(
            SegmentId.SESSION, False, "⏱️", "\U000f19bb", _FOAM, Rgb(42, 39, 63)
        ),
        _segment(
            SegmentId.OUTPUT_STYLE, False, "🎯", "\U000f12f5", Rgb(49, 116, 143), _OVERLAY
        ),
    ]