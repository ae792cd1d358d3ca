"""Shared fixtures for the path tracer tests.

Randomness is always injected: tests either use a seeded ``random.Random``
or a ``ScriptedRng`` that replays fixed draws so scatter outcomes can be
predicted exactly.
"""

import itertools
import random

import pytest

from core.vector import Vector3
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric


class ScriptedRng:
    """Random source replaying fixed values.

    ``uniform(a, b)`` returns the next scripted uniform value unchanged (the
    bounds are ignored), ``random()`` the next scripted unit value. Both
    sequences cycle.
    """

    def __init__(self, uniforms=(0.0,), randoms=(0.5,)):
        self._uniforms = itertools.cycle(uniforms)
        self._randoms = itertools.cycle(randoms)

    def uniform(self, a, b):
        return next(self._uniforms)

    def random(self):
        return next(self._randoms)


@pytest.fixture
def rng():
    """Seeded standard-library generator."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def gray_diffuse():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def mirror():
    return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)


@pytest.fixture
def glass():
    return Dielectric(1.5)


def assert_vec_close(actual, expected, tol=1e-9):
    """Component-wise comparison of two vectors."""
    for a, e in zip(actual, expected):
        assert abs(a - e) <= tol, f"{actual!r} != {expected!r}"
