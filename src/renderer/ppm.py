# renderer/ppm.py
import logging

logger = logging.getLogger(__name__)

def encode_ppm(image) -> str:
    """
    Serialize an image to plain-text PPM (P3): a header with the magic token,
    dimensions and maximum channel value, then one line of RGB triplets per row.
    """
    parts = [f"P3\n{image.width} {image.height}\n255\n"]
    for y in range(image.height):
        row = []
        for x in range(image.width):
            r, g, b = image.get_pixel(x, y)
            row.append(f"{r} {g} {b} ")
        parts.append("".join(row) + "\n")
    return "".join(parts)

def write_ppm(image, path) -> None:
    with open(path, "w", encoding="ascii") as f:
        f.write(encode_ppm(image))
    logger.info("Wrote %dx%d PPM image to %s", image.width, image.height, path)
