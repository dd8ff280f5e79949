"""
Export plan: master format, editorial deliverable, delivery checklist.
"""
from ..schema import ExportPlan


def build_export_plan() -> ExportPlan:
    return ExportPlan(
        format="EXR (ACEScg, 16-bit half) sequence for master",
        editorial="ProRes 4444 XQ, 4K, 24fps, audio temp mix placeholders",
        delivery=(
            "Use OCIO configs for automatic conversions.",
            "Embed latest LUTs and camera reports in delivery package.",
            "Generate review MP4 (H.265, 15 Mbps) with burnt-in timecode Marathi + English labeling.",
        ),
    )
