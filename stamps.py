import logging
from collections import namedtuple
from pathlib import Path

import cv2
import numpy as np

from config import IMG_WIDTH, IMG_HEIGHT, STAMP_ASSETS

logger = logging.getLogger(__name__)

# Sello ya pegado sobre el lienzo: imagen + esquina superior izquierda.
# namedtuple porque un sello no cambia una vez creado.
Stamp = namedtuple("Stamp", ["image", "x", "y"])


class StampImage:
    """Imagen RGBA de un sello (gafas, sombrero, bigote, barba de Papá Noel)."""

    def __init__(self, name, pixels):
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"El sello {name!r} necesita 4 canales (BGRA)")
        self.name = name
        self.pixels = pixels

    def __repr__(self):
        h, w = self.pixels.shape[:2]
        return f"StampImage({self.name!r}, {w}x{h})"


def load_stamp_image(path):
    # Carga un PNG con canal alpha; sin transparencia no se puede mezclar sobre el video
    img = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if img is None or img.ndim != 3 or img.shape[2] != 4:
        raise SystemExit(f"Error: {path} no encontrado o sin transparencia")
    return img


def load_stamp_catalog(assets=STAMP_ASSETS, base_dir="."):
    """
    Carga todos los sellos una sola vez al inicio y devuelve {nombre: StampImage}.
    """
    base = Path(base_dir)
    catalog = {}
    for name, rel_path in assets.items():
        catalog[name] = StampImage(name, load_stamp_image(base / rel_path))
        logger.debug("Sello %s cargado desde %s", name, base / rel_path)
    return catalog


def overlay_image(background, rgba, top_left, size=None):
    """
    Superpone una imagen BGRA sobre una imagen BGR (in-place) y la devuelve.
    - top_left: esquina superior izquierda (x, y) donde se apoya la imagen.
    - size: (ancho, alto) al que se redimensiona; None la deja como está.
    - La parte que cae fuera del fondo se recorta.
    - El canal alpha decide la mezcla: out = a * sello + (1 - a) * fondo.
    """
    bg_height, bg_width = background.shape[:2]

    if size is not None and (rgba.shape[1], rgba.shape[0]) != tuple(size):
        rgba = cv2.resize(rgba, (max(1, int(size[0])), max(1, int(size[1]))))
    img_height, img_width = rgba.shape[:2]

    x_start, y_start = int(top_left[0]), int(top_left[1])
    x_end = x_start + img_width
    y_end = y_start + img_height

    # Completamente fuera del fondo: nada que hacer
    if x_end <= 0 or y_end <= 0 or x_start >= bg_width or y_start >= bg_height:
        return background

    x_start_clip = max(0, x_start)
    y_start_clip = max(0, y_start)
    x_end_clip = min(bg_width, x_end)
    y_end_clip = min(bg_height, y_end)

    cropped = rgba[
        y_start_clip - y_start:y_end_clip - y_start,
        x_start_clip - x_start:x_end_clip - x_start
    ]
    if cropped.size == 0:
        return background

    bgr = cropped[:, :, :3].astype(np.float32)
    alpha = cropped[:, :, 3:].astype(np.float32) / 255.0

    roi = background[y_start_clip:y_end_clip, x_start_clip:x_end_clip].astype(np.float32)
    blended = (alpha * bgr + (1 - alpha) * roi).astype(np.uint8)
    background[y_start_clip:y_end_clip, x_start_clip:x_end_clip] = blended

    return background


def draw_stamp(canvas, image, x, y):
    """Dibuja un sello con su tamaño fijo apoyado en (x, y)."""
    return overlay_image(canvas, image.pixels, (x, y), size=(IMG_WIDTH, IMG_HEIGHT))
