"""The minimal theme: plain symbols and basic colours without bold."""

from __future__ import annotations

from ccline.models import (
    Color16,
    ColorConfig,
    IconConfig,
    SegmentConfig,
    SegmentId,
    TextStyleConfig,
)


def _segment(segment_id, enabled, plain, nerd_font, icon_color, text_color=None, options=None):
    return SegmentConfig(
        id=segment_id,
        enabled=enabled,
        icon=IconConfig(plain=plain, nerd_font=nerd_font),
        colors=ColorConfig(
            icon=icon_color,
            text=text_color if text_color is not None else icon_color,
            background=None,
        ),
        styles=TextStyleConfig(),
        options=options or {},
    )


def segments() -> list[SegmentConfig]:
    """The theme's segments, in display order."""
    return [
        _segment(SegmentId.MODEL, True, "✽", "\uf2d0", Color16(14)),
        _segment(SegmentId.DIRECTORY, True, "◐", "\U000f024b", Color16(11), Color16(10)),
        _segment(
            SegmentId.GIT, True, "※", "\U000f02a2", Color16(12),
            options={"show_sha": False},
        ),
        _segment(SegmentId.CONTEXT_WINDOW, True, "◐", "\uf49b", Color16(13)),
        _segment(
            SegmentId.USAGE, False, "📊", "\U000f0a9e", Color16(14),
            options={
                "api_base_url": "https://api.anthropic.com",
                "cache_duration": 180,
                "timeout": 2,
            },
        ),
        _segment(SegmentId.COST, False, "💰", "\ueec1", Color16(3)),
        _segment(SegmentId.SESSION, False, "⏱️", "\U000f19bb", Color16(2)),
        _segment(SegmentId.OUTPUT_STYLE, False, "🎯", "\U000f12f5", Color16(6)),
    ]