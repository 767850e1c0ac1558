"""Decaying particle bursts spawned by triggers.

Physics is cosmetic: explicit Euler integration with constant
downward acceleration and a linear alpha fade. Randomness only shapes the
initial velocities and is drawn from the caller's ``Random`` instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from snowtrail.config.constants import ALPHA_DECAY, BURST_SIZE, GRAVITY, PARTICLE_SIZE


@dataclass
class Particle:
    """A single short-lived projectile in pixel space."""

    x: float
    y: float
    vx: float
    vy: float
    alpha: float = 1.0


def spawn_burst(
    origin_x: float,
    origin_y: float,
    rng: Random,
    count: int = BURST_SIZE,
    particle_size: int = PARTICLE_SIZE,
    jitter: float = 0.0,
) -> list[Particle]:
    """Create ``count`` particles centred horizontally on ``origin_x``.

    Each particle starts moving upward (``vy`` in ``[-3, -2)``) with a small
    horizontal drift (``vx`` in ``[-1, 1)``) at full opacity.
    """
    particles: list[Particle] = []
    for _ in range(count):
        offset = rng.uniform(-jitter, jitter) if jitter > 0.0 else 0.0
        particles.append(
            Particle(
                x=origin_x - particle_size / 2 + offset,
                y=origin_y,
                vy=-2.0 - rng.random(),
                vx=(rng.random() - 0.5) * 2.0,
                alpha=1.0,
            )
        )
    return particles


def advance_particles(
    particles: list[Particle],
    gravity: float = GRAVITY,
    alpha_decay: float = ALPHA_DECAY,
) -> list[Particle]:
    """Advance every particle one step and return the survivors.

    Particles whose alpha reaches zero or below during this step are dropped.
    """
    for particle in particles:
        particle.x += particle.vx
        particle.y += particle.vy
        particle.vy += gravity
        particle.alpha -= alpha_decay
    return [particle for particle in particles if particle.alpha > 0.0]
