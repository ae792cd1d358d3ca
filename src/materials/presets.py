# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.50)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Air inside glass: the ratio of the two indices
        return Dielectric(1.00 / 1.50)

class ColorPresets:
    """Common color presets for materials."""

    GROUND = Vector3(0.8, 0.8, 0.0)
    BLUE = Vector3(0.1, 0.2, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
