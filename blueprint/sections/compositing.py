"""
Compositing: plate integration, atmospherics, color & finishing.
"""
from ..interpretation.schema import SceneTraits
from ..schema import CompositingPass


def build_compositing_setup(traits: SceneTraits) -> tuple[CompositingPass, ...]:
    # Same three passes for every scene
    return (
        CompositingPass(
            name="Plate & CG Integration",
            layers=(
                "RAW Plate / बेस फुटेज",
                "CG Beauty (ACEScg) multiplied 1.0",
                "Utility AOVs: diffuse, specular, emission, sss",
            ),
            blend="Linear Dodge (Add) सह नियंत्रण, Marathi आर्ट डायरेक्टर सोबत रिफरन्स.",
        ),
        CompositingPass(
            name="Atmospherics",
            layers=(
                "Volume Light Pass",
                "FX Particles ID mattes",
                "Z-Depth for fog matte",
            ),
            blend="Screen + Exponential Fog shader in Nuke.",
        ),
        CompositingPass(
            name="Color & Finishing",
            layers=(
                "Primary Grade: ACES LMT for mood",
                "Secondary Grade: Power Windows on faces",
                "Film Grain: 35mm 500T scanned overlay",
            ),
            blend="Overlay 35%, then LUT burn-in with Rec.709 trim pass.",
        ),
    )
