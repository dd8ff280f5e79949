"""
Camera plan: establishing shot and hero action shot.
"""
from ..interpretation.schema import SceneTraits
from ..schema import CameraShot


def build_camera_plan(traits: SceneTraits) -> tuple[CameraShot, ...]:
    return (
        CameraShot(
            label="Shot A / Establishing",
            description=(
                f"35mm anamorphic, {traits.style} drift, horizon locked. "
                f"Keyframe path easing for {traits.time_of_day} softness."
            ),
            settings=(
                "Focal: 28mm, T2.8, subtle barrel distortion",
                "Sensor Height: 24.89mm; Gate: ARRI Open Gate",
                "Shutter: 217°, motion blur sampling 0.5 frame offset",
            ),
        ),
        CameraShot(
            label="Shot B / Hero Action",
            description="55mm close-up with parallax sweep highlighting Marathi भावनिक बीट.",
            settings=(
                "Focal: 55mm, T2.3",
                "Handheld noise layer amplitude 0.03, frequency 2.1 Hz",
                "Depth of Field: focus pull 12m → 6m over 48 frames",
            ),
        ),
    )
