"""Tests for snowtrail.domain.particles."""

from __future__ import annotations

from random import Random

import pytest

from snowtrail.domain.particles import Particle, advance_particles, spawn_burst


class TestSpawnBurst:
    def test_default_burst_size(self) -> None:
        assert len(spawn_burst(40.0, 32.0, Random(0))) == 5

    def test_initial_state(self) -> None:
        for particle in spawn_burst(48.0, 64.0, Random(1), particle_size=16):
            assert particle.x == pytest.approx(40.0)
            assert particle.y == 64.0
            assert -3.0 < particle.vy <= -2.0
            assert -1.0 <= particle.vx < 1.0
            assert particle.alpha == 1.0

    def test_jitter_stays_within_bounds(self) -> None:
        particles = spawn_burst(100.0, 0.0, Random(2), count=50, particle_size=16, jitter=3.0)
        xs = [p.x for p in particles]
        assert all(89.0 <= x <= 95.0 for x in xs)
        assert len(set(xs)) > 1

    def test_same_seed_same_burst(self) -> None:
        assert spawn_burst(10.0, 10.0, Random(7)) == spawn_burst(10.0, 10.0, Random(7))


class TestAdvanceParticles:
    def test_integrates_then_accelerates(self) -> None:
        particle = Particle(x=10.0, y=20.0, vx=1.0, vy=-2.0, alpha=1.0)
        (advanced,) = advance_particles([particle])
        assert advanced.x == pytest.approx(11.0)
        assert advanced.y == pytest.approx(18.0)
        assert advanced.vy == pytest.approx(-1.9)
        assert advanced.alpha == pytest.approx(0.95)

    def test_removes_particle_reaching_zero_alpha(self) -> None:
        fading = Particle(x=0.0, y=0.0, vx=0.0, vy=0.0, alpha=0.03)
        alive = Particle(x=0.0, y=0.0, vx=0.0, vy=0.0, alpha=0.5)
        assert advance_particles([fading, alive]) == [alive]

    def test_removes_already_dead_particle(self) -> None:
        dead = Particle(x=0.0, y=0.0, vx=0.0, vy=0.0, alpha=0.0)
        assert advance_particles([dead]) == []

    def test_count_non_increasing_until_empty(self) -> None:
        particles = spawn_burst(0.0, 0.0, Random(3))
        counts = [len(particles)]
        for _ in range(25):
            particles = advance_particles(particles)
            counts.append(len(particles))
        assert counts[0] == 5
        assert all(a >= b for a, b in zip(counts, counts[1:]))
        assert counts[19] == 5
        assert counts[-1] == 0

    def test_custom_physics(self) -> None:
        particle = Particle(x=0.0, y=0.0, vx=0.0, vy=0.0, alpha=1.0)
        (advanced,) = advance_particles([particle], gravity=0.5, alpha_decay=0.25)
        assert advanced.vy == pytest.approx(0.5)
        assert advanced.alpha == pytest.approx(0.75)
