"""Tracks which segment is being edited."""

from __future__ import annotations

from dataclasses import dataclass

from ccline.models import SegmentId


@dataclass
class EditorComponent:
    editing_segment: SegmentId | None = None

    def edit_segment(self, segment_id: SegmentId) -> None:
        self.editing_segment = segment_id

    def stop_editing(self) -> None:
        self.editing_segment = None

    def is_editing(self, segment_id: SegmentId) -> bool:
        return self.editing_segment is segment_id