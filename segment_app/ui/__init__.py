"""UI Components for the Segment Composer"""

from segment_app.ui.segment_panel import render_segment_panel

__all__ = [
    "render_segment_panel",
]
