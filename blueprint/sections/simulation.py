"""
FX simulation parameters: emitter, forces, secondary passes.
Numbers are derived from traits only; the rest are house defaults.
"""
from ..interpretation.schema import SceneTraits
from ..schema import SimulationBlock

# Points per second contributed by each detected FX element
EMISSION_PER_EFFECT = 1800


def emission_rate(traits: SceneTraits) -> int:
    return len(traits.effects) * EMISSION_PER_EFFECT


def particle_lifetime(traits: SceneTraits) -> str:
    return "4.2s" if traits.weather == "clear" else "5.5s"


def turbulence_frequency(traits: SceneTraits) -> str:
    return "18.0" if traits.mood == "chaotic" else "9.5"


def wind_speed(traits: SceneTraits) -> str:
    return "9.4" if traits.weather == "wind" else "3.1"


def build_simulation_params(traits: SceneTraits) -> tuple[SimulationBlock, ...]:
    return (
        SimulationBlock(
            name="Primary Emitter / मुख्य स्रोत",
            details=(
                f"Emission Rate: {emission_rate(traits)} pts/sec",
                "Initial Velocity: 6.5 m/s (directional, spread cone 38°)",
                f"Lifetime: {particle_lifetime(traits)} average with variance 35%",
                "Temperature Attribute: activated for shading cross-link",
            ),
        ),
        SimulationBlock(
            name="Forces / बल नियंत्रण",
            details=(
                "Gravity: -9.65 m/s² (custom tweak for scale realism)",
                f"Turbulence: amplitude 0.65, frequency {turbulence_frequency(traits)} Hz, roughness 0.47",
                f"Wind: {wind_speed(traits)} m/s from azimuth 58°, elevation 6°",
                "Drag: 0.18 with ramp to 0.42 near emitter exit",
            ),
        ),
        SimulationBlock(
            name="Secondary FX / दुय्यम प्रभाव",
            details=(
                "Spark pass: POP replicate every 12 frames, random life 16-42 frames",
                "Volumetric fog: density 0.045, scattering albedo 0.82",
                "Debris instancing: 3 shape variations, scale jitter ±22%",
            ),
        ),
    )
