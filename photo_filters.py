import logging
import sys
from pathlib import Path

import cv2
import numpy as np

from config import BLUR_RADIUS, POSTERIZE_LEVELS

logger = logging.getLogger(__name__)

# Filtro neutro: deja el frame como está
NEUTRAL_FILTER = "opaque"


def invert(img):
    """Negativo: cada canal pasa a 255 - v."""
    return cv2.bitwise_not(img)


def blur(img, radius=BLUR_RADIUS):
    """
    Desenfoque gaussiano. radius hace de sigma; con kernel (0, 0) OpenCV
    calcula el tamaño del kernel a partir de sigma.
    """
    if radius <= 0:
        return img.copy()
    return cv2.GaussianBlur(img, (0, 0), sigmaX=radius, sigmaY=radius)


def posterize(img, levels=POSTERIZE_LEVELS):
    """
    Reduce cada canal a 'levels' valores usando una LUT.
    Cada valor v se lleva al escalón (v * levels) >> 8 y el escalón se
    reescala a [0, 255], así el negro y el blanco se conservan.
    """
    if not 2 <= levels <= 255:
        raise ValueError(f"levels debe estar entre 2 y 255, no {levels}")
    steps = (np.arange(256) * levels) >> 8
    lut = (steps * 255 // (levels - 1)).clip(0, 255).astype(np.uint8)
    return cv2.LUT(img, lut)


def gray(img):
    """
    Escala de grises con la luminancia de OpenCV. El resultado vuelve a
    3 canales para poder seguir componiendo sobre el lienzo BGR.
    """
    g = cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
    return cv2.cvtColor(g, cv2.COLOR_GRAY2BGR)


def opaque(img):
    """Filtro neutro: devuelve una copia sin cambios."""
    return img.copy()


FILTERS = {
    "invert": invert,
    "blur": blur,
    "posterize": posterize,
    "gray": gray,
    NEUTRAL_FILTER: opaque,
}


def apply_filter(img, name):
    try:
        fn = FILTERS[name]
    except KeyError:
        raise ValueError(f"Filtro desconocido: {name!r}") from None
    return fn(img)


class FilterState:
    """
    Filtro activo del frame. Hay uno solo a la vez (no se encadenan).
    """

    def __init__(self):
        self.active = NEUTRAL_FILTER

    def select(self, name):
        if name not in FILTERS:
            raise ValueError(f"Filtro desconocido: {name!r}")
        self.active = name
        logger.debug("Filtro activo: %s", name)

    def reset(self):
        self.active = NEUTRAL_FILTER

    def apply(self, img, no_filter=False):
        """
        Aplica el filtro activo y devuelve el frame nuevo.
        Con la casilla "Sin filtro" marcada, el filtro vuelve a 'opaque'
        después de aplicarse; no_filter es una foto del estado de la casilla
        tomada una vez por frame.
        """
        out = apply_filter(img, self.active)
        if no_filter and self.active != NEUTRAL_FILTER:
            logger.debug("Sin filtro marcado: %s -> %s", self.active, NEUTRAL_FILTER)
            self.active = NEUTRAL_FILTER
        return out


if __name__ == "__main__":
    # Uso: python photo_filters.py <imagen> [filtro]
    path_in = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("assets/foto.jpg")
    name = sys.argv[2] if len(sys.argv) > 2 else "posterize"
    img = cv2.imread(str(path_in))
    if img is None:
        raise SystemExit(f"No se pudo abrir {path_in}")

    out = apply_filter(img, name)
    cv2.imwrite(f"foto_{name}.jpg", out)
    print(f"Listo: foto_{name}.jpg")
