"""The cometix theme: bold basic colours with Nerd Font icons."""

from __future__ import annotations

from ccline.models import (
    Color16,
    ColorConfig,
    IconConfig,
    SegmentConfig,
    SegmentId,
    TextStyleConfig,
)


def _segment(segment_id, enabled, plain, nerd_font, color, bold=True, options=None):
    return SegmentConfig(
        id=segment_id,
        enabled=enabled,
        icon=IconConfig(plain=plain, nerd_font=nerd_font),
        colors=ColorConfig(icon=color, text=color, background=None),
        styles=TextStyleConfig(text_bold=bold),
        options=options or {},
    )


def segments() -> list[SegmentConfig]:
    """The theme's segments, in display order."""
    return [
        _segment(SegmentId.MODEL, True, "🤖", "\ue26d", Color16(14)),
        SegmentConfig(
            id=SegmentId.DIRECTORY,
            enabled=True,
            icon=IconConfig(plain="📁", nerd_font="\U000f024b"),
            colors=ColorConfig(icon=Color16(11), text=Color16(10), background=None),
            styles=TextStyleConfig(text_bold=True),
        ),
        _segment(
            SegmentId.GIT, True, "🌿", "\U000f02a2", Color16(12),
            options={"show_sha": False},
        ),
        _segment(SegmentId.CONTEXT_WINDOW, True, "⚡️", "\uf49b", Color16(13)),
        _segment(
            SegmentId.USAGE, False, "📊", "\U000f0a9e", Color16(14), bold=False,
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