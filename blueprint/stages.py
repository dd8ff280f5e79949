"""
Stage titles and the plain-text blueprint report.
Titles are bilingual (English / Marathi) and follow the order the plan is presented in.
"""
from .schema import VfxPlan

# Display order of the blueprint sections
STAGE_TITLES: tuple[str, ...] = (
    "Scene Layout / सेट डिझाईन",
    "Simulation Specs / पार्टिकल नियंत्रण",
    "Lighting / प्रकाश व्यवस्था",
    "Camera Craft / कॅमेरा रचना",
    "Render Engine / रेंडर सेटअप",
    "Compositing / कलर ग्रेड",
    "Delivery / एक्स्पोर्ट निर्देश",
)

# Quick-start brief for the CLI (--sample) and GET /api/sample
SAMPLE_DETAILS = (
    "A rain-soaked cyberpunk alley in Mumbai at midnight, neon signs flickering, "
    "stealthy heroine weaving through smoke while drones scan the streets."
)


def _section(title: str, lines: list[str]) -> str:
    rule = "=" * len(title)
    return "\n".join([title, rule, *lines])


def render_report(plan: VfxPlan) -> str:
    """Render the plan as a plain-text report, one titled block per stage."""
    layout = [plan.scene_synopsis, "", *plan.narrative_beats]

    simulation: list[str] = []
    for block in plan.simulation_params:
        simulation.append(f"[{block.name}]")
        simulation.extend(f"  - {d}" for d in block.details)

    light = plan.lighting_setup
    lighting = [light.hdri, light.key, light.fill, light.rim, light.practicals, light.notes]

    camera: list[str] = []
    for shot in plan.camera_plan:
        camera.append(f"[{shot.label}]")
        camera.append(f"  {shot.description}")
        camera.extend(f"  - {s}" for s in shot.settings)

    r = plan.render_settings
    render = [r.resolution, r.frame_rate, r.samples, r.denoiser, r.motion_blur, r.cache, r.notes]

    compositing: list[str] = []
    for p in plan.compositing_setup:
        compositing.append(f"[{p.name}]")
        compositing.extend(f"  - {layer}" for layer in p.layers)
        compositing.append(f"  Blend: {p.blend}")

    export = [
        f"Master Export: {plan.export_plan.format}",
        f"Editorial Delivery: {plan.export_plan.editorial}",
        *(f"• {tip}" for tip in plan.export_plan.delivery),
    ]

    bodies = (layout, simulation, lighting, camera, render, compositing, export)
    return "\n\n".join(_section(title, body) for title, body in zip(STAGE_TITLES, bodies)) + "\n"
