"""
Section builders: one pure function per blueprint section.
"""
from .narrative import build_narrative_beats, format_synopsis
from .simulation import build_simulation_params
from .lighting import build_lighting_setup
from .camera import build_camera_plan
from .render import build_render_settings
from .compositing import build_compositing_setup
from .export import build_export_plan

__all__ = [
    "build_narrative_beats",
    "format_synopsis",
    "build_simulation_params",
    "build_lighting_setup",
    "build_camera_plan",
    "build_render_settings",
    "build_compositing_setup",
    "build_export_plan",
]
