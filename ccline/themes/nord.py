"""The nord theme: dark text on Nord palette backgrounds."""

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

_FOREGROUND = Rgb(46, 52, 64)
_FROST = Rgb(136, 192, 208)
_GREEN = Rgb(163, 190, 140)


def _segment(segment_id, enabled, plain, nerd_font, background, options=None):
    return SegmentConfig(
        id=segment_id,
        enabled=enabled,
        icon=IconConfig(plain=plain, nerd_font=nerd_font),
        colors=ColorConfig(icon=_FOREGROUND, text=_FOREGROUND, background=background),
        styles=TextStyleConfig(),
        options=options or {},
    )


def segments() -> list[SegmentConfig]:
    """The theme's segments, in display order."""
    return [
        _segment(SegmentId.MODEL, True, "🤖", "\ue26d", _FROST),
        _segment(SegmentId.DIRECTORY, True, "📁", "\U000f024b", _GREEN),
        _segment(
            SegmentId.GIT, True, "🌿", "\U000f02a2", Rgb(129, 161, 193),
            options={"show_sha": False},
        ),
        _segment(SegmentId.CONTEXT_WINDOW, True, "⚡️", "\uf49b", Rgb(180, 142, 173)),
        SegmentConfig(
            id=SegmentId.USAGE,
            enabled=False,
            icon=IconConfig(plain="📊", nerd_font="\U000f0a9e"),
            colors=ColorConfig(icon=Color16(14), text=Color16(14), background=None),
            styles=TextStyleConfig(),
            options={
                "api_base_url": "https://api.anthropic.com",
                "cache_duration": 180,
                "timeout": 2,
            },
        ),
        _segment(SegmentId.COST, False, "💰", "\ueec1", Rgb(235, 203, 139)),
        _segment(SegmentId.SESSION, False, "⏱️", "\U000f19bb", _GREEN),
        _segment(SegmentId.OUTPUT_STYLE, False, "🎯", "\U000f12f5", _FROST),
    ]