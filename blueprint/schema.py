"""
Schema for the generated production blueprint.
Every section is a fixed-shape record of strings; to_dict gives the JSON transport form.
"""
from dataclasses import dataclass
from typing import Any

from .interpretation.schema import SceneTraits


@dataclass(frozen=True)
class SimulationBlock:
    name: str
    details: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "details": list(self.details)}


@dataclass(frozen=True)
class LightingSetup:
    hdri: str
    key: str
    fill: str
    rim: str
    practicals: str
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "hdri": self.hdri,
            "key": self.key,
            "fill": self.fill,
            "rim": self.rim,
            "practicals": self.practicals,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class CameraShot:
    label: str
    description: str
    settings: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "description": self.description, "settings": list(self.settings)}


@dataclass(frozen=True)
class RenderSettings:
    resolution: str
    frame_rate: str
    samples: str
    denoiser: str
    motion_blur: str
    cache: str
    notes: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "resolution": self.resolution,
            "frameRate": self.frame_rate,
            "samples": self.samples,
            "denoiser": self.denoiser,
            "motionBlur": self.motion_blur,
            "cache": self.cache,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class CompositingPass:
    name: str
    layers: tuple[str, ...]
    blend: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "layers": list(self.layers), "blend": self.blend}


@dataclass(frozen=True)
class ExportPlan:
    format: str
    editorial: str
    delivery: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"format": self.format, "editorial": self.editorial, "delivery": list(self.delivery)}


@dataclass(frozen=True)
class VfxPlan:
    """
    Full blueprint for one scene description.
    Purely derived from the traits and the raw text; created per request, never stored.
    """

    scene_synopsis: str
    narrative_beats: tuple[str, ...]
    simulation_params: tuple[SimulationBlock, ...]
    lighting_setup: LightingSetup
    camera_plan: tuple[CameraShot, ...]
    render_settings: RenderSettings
    compositing_setup: tuple[CompositingPass, ...]
    export_plan: ExportPlan
    traits: SceneTraits

    def to_dict(self) -> dict[str, Any]:
        """Full serialization for the API. JSON-safe: only str, bool, list and dict."""
        return {
            "sceneSynopsis": self.scene_synopsis,
            "narrativeBeats": list(self.narrative_beats),
            "simulationParams": [b.to_dict() for b in self.simulation_params],
            "lightingSetup": self.lighting_setup.to_dict(),
            "cameraPlan": [s.to_dict() for s in self.camera_plan],
            "renderSettings": self.render_settings.to_dict(),
            "compositingSetup": [p.to_dict() for p in self.compositing_setup],
            "exportPlan": self.export_plan.to_dict(),
            "traits": self.traits.to_dict(),
        }
