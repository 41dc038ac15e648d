# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "radjax"]
#
# [tool.uv.sources]
# radjax = { path = ".." }
# ///
"""Compare solar radiation pressure on a box-wing spacecraft and a cannonball.

Builds a box-shaped bus spinning about its z-axis with a sun-tracking solar
array, places it at a fixed heliocentric distance, and evaluates the
radiation pressure acceleration over one spin period.  The result is
compared with a cannonball of the same Sun-facing reference area.

Requires radjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/box_wing_srp.py [OPTIONS]

Examples:
    # Default 2 x 2 x 3 m bus with a 20 m^2 array at 1 AU
    uv run examples/box_wing_srp.py

    # Closer to the Sun, faster spin, no solar array
    uv run examples/box_wing_srp.py --distance-au 0.7 --spin-period 600 --array-area 0
"""

import time
from typing import Annotated

import jax.numpy as jnp
import typer

from radjax import (
    AU,
    SOLAR_CONSTANT,
    CannonballTargetSettings,
    PaneledTargetSettings,
    Rz,
    create_radiation_pressure_acceleration,
    reflection_law_from_specular_and_diffuse_reflectivity,
    set_dtype,
)

set_dtype(jnp.float64)  # Must be before any model is built


def main(
    distance_au: Annotated[float, typer.Option(help="Heliocentric distance in AU")] = 1.0,
    mass: Annotated[float, typer.Option(help="Spacecraft mass in kg")] = 1000.0,
    length_x: Annotated[float, typer.Option(help="Bus length along x in m")] = 2.0,
    length_y: Annotated[float, typer.Option(help="Bus length along y in m")] = 2.0,
    length_z: Annotated[float, typer.Option(help="Bus length along z in m")] = 3.0,
    array_area: Annotated[float, typer.Option(help="Solar array area in m^2")] = 20.0,
    spin_period: Annotated[float, typer.Option(help="Bus spin period about z in s")] = 5400.0,
    n_steps: Annotated[int, typer.Option(help="Evaluation times per spin period")] = 36,
) -> None:
    """Evaluate box-wing and cannonball radiation pressure accelerations."""
    sun_position = jnp.zeros(3)
    body_position = jnp.array([distance_au * AU, 0.0, 0.0])
    sun_direction = (sun_position - body_position) / jnp.linalg.norm(sun_position - body_position)
    irradiance = SOLAR_CONSTANT / distance_au**2
    spin_rate = 2.0 * jnp.pi / spin_period

    # ── Stage 1: Build target models ─────────────────────────────────────
    print("── Stage 1: Building target models ──")
    t0 = time.perf_counter()

    bus_law = reflection_law_from_specular_and_diffuse_reflectivity(0.1, 0.3)
    array_law = reflection_law_from_specular_and_diffuse_reflectivity(0.05, 0.05)
    box_wing = PaneledTargetSettings.box_wing(
        length_x,
        length_y,
        length_z,
        bus_law,
        solar_array_area=array_area,
        solar_array_reflection_law=array_law,
        sun_direction_function=lambda t: sun_direction,
        attitude_function=lambda t: Rz(spin_rate * t).T,
    )

    # Sun in the body x-y plane: one side face plus the array face the Sun
    reference_area = max(length_y, length_x) * length_z + array_area
    cannonball = CannonballTargetSettings(reference_area, 1.3)

    models = {}
    for name, settings in (("box-wing", box_wing), ("cannonball", cannonball)):
        models[name] = create_radiation_pressure_acceleration(
            lambda t: sun_position,
            lambda t: body_position,
            lambda t: irradiance,
            lambda t: mass,
            settings,
        )
    print(f"  Box-wing panels: {len(box_wing.panels)}")
    print(f"  Cannonball reference area: {reference_area:.2f} m^2")
    print(f"  Irradiance: {irradiance:.1f} W/m^2")
    print(f"  Built in {time.perf_counter() - t0:.2f}s")

    # ── Stage 2: Evaluate over one spin period ───────────────────────────
    print("\n── Stage 2: Evaluating accelerations ──")
    t0 = time.perf_counter()

    times = jnp.linspace(0.0, spin_period, n_steps, endpoint=False)
    history = {name: [] for name in models}
    for t in times.tolist():
        for name, acceleration in models.items():
            acceleration.update_members(t)
            history[name].append(acceleration.get_acceleration())

    print(f"  {n_steps} epochs evaluated in {time.perf_counter() - t0:.2f}s")

    # ── Stage 3: Summary ─────────────────────────────────────────────────
    print("\n── Stage 3: Summary ──")
    print(f"  {'t [s]':>10}  {'|a| box-wing [m/s^2]':>22}  {'|a| cannonball [m/s^2]':>24}")
    stride = max(1, n_steps // 8)
    for i in range(0, n_steps, stride):
        a_box = float(jnp.linalg.norm(history["box-wing"][i]))
        a_ball = float(jnp.linalg.norm(history["cannonball"][i]))
        print(f"  {float(times[i]):>10.1f}  {a_box:>22.6e}  {a_ball:>24.6e}")

    mean_box = jnp.mean(jnp.stack(history["box-wing"]), axis=0)
    mean_ball = jnp.mean(jnp.stack(history["cannonball"]), axis=0)
    print(f"\n  Mean box-wing acceleration:   {mean_box}")
    print(f"  Mean cannonball acceleration: {mean_ball}")
    ratio = float(jnp.linalg.norm(mean_box) / jnp.linalg.norm(mean_ball))
    print(f"  Box-wing / cannonball magnitude ratio: {ratio:.3f}")


if __name__ == "__main__":
    typer.run(main)
