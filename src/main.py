# main.py
import argparse
import logging
import sys
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.presets import ColorPresets, DielectricPresets, MetalPresets
from renderer.raytracer import Renderer

logger = logging.getLogger("main")

QUALITY_LEVELS = {
    "preview": {"samples": 4, "max_depth": 4},
    "balanced": {"samples": 20, "max_depth": 10},
    "high_quality": {"samples": 100, "max_depth": 50},
}

def ground_and_sphere_scene():
    world = HittableList()
    world.add(Sphere(Vector3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GROUND)))
    world.add(Sphere(Vector3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    return world, {}

def materials_scene():
    ground = ColorPresets.matte(ColorPresets.GROUND)
    center = ColorPresets.matte(ColorPresets.BLUE)
    glass = DielectricPresets.glass()
    bubble = DielectricPresets.air_bubble()
    metal = MetalPresets.gold()

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ground))
    world.add(Sphere(Vector3(0.0, 0.0, -1.2), 0.5, center))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.4, bubble))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, metal))
    return world, {}

def defocus_scene():
    world, _ = materials_scene()
    view = {
        "vfov": 20.0,
        "lookfrom": Vector3(-2, 2, 1),
        "lookat": Vector3(0, 0, -1),
        "vup": Vector3(0, 1, 0),
        "defocus_angle": 10.0,
        "focus_dist": 3.4,
    }
    return world, view

SCENES = {
    "ground_and_sphere": ground_and_sphere_scene,
    "materials": materials_scene,
    "defocus": defocus_scene,
}

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a scene of spheres with a Monte Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="materials")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview")
    parser.add_argument("--samples", type=int, default=None, help="Override samples per pixel")
    parser.add_argument("--max-depth", type=int, default=None, help="Override bounce limit")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible render")
    parser.add_argument("--output", default="image.ppm", help="Output path (.ppm, .png, ...)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    quality = QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["max_depth"]

    world, view = SCENES[args.scene]()
    try:
        camera = Camera.from_aspect_ratio(args.width, args.aspect_ratio,
                                          samples_per_pixel=samples, max_depth=max_depth, **view)
    except ValueError as e:
        logger.error("Invalid camera configuration: %s", e)
        return 2

    logger.info("Scene '%s' with %d objects", args.scene, len(world))
    image = Renderer(camera, seed=args.seed).render(world)

    try:
        image.save(args.output)
    except (OSError, ValueError) as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
