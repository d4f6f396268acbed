"""Editor-facing adapters: arc handle data, no drawing."""

from projectile_arc.editor.arc_handle import (
    FIRE_LINE_LENGTH,
    HANDLE_RADIUS,
    ArcHandleAdapter,
    ArcHandleFrame,
    ArcHandleTarget,
    fire_lines,
    handle_frame,
)

__all__ = [
    "FIRE_LINE_LENGTH",
    "HANDLE_RADIUS",
    "ArcHandleAdapter",
    "ArcHandleFrame",
    "ArcHandleTarget",
    "fire_lines",
    "handle_frame",
]
