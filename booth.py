import logging
from collections import namedtuple
from pathlib import Path

import cv2
import numpy as np

from config import (BACKGROUND_GRAY, DEFAULT_SNAPSHOT, PALETTE, DEFAULT_BORDER_COLOR,
                    DEFAULT_FILL_COLOR, DEFAULT_BORDER_THICKNESS)
from interaction import InteractionState
from overlay_store import OverlayStore
from photo_filters import FilterState
from shapes import draw_shape
from stamps import draw_stamp

logger = logging.getLogger(__name__)

# Valores del panel (colores y grosor) en el momento de crear una figura
ShapeStyle = namedtuple("ShapeStyle", ["border_color", "fill_color", "border_thickness"])


def default_style():
    return ShapeStyle(PALETTE[DEFAULT_BORDER_COLOR][1], PALETTE[DEFAULT_FILL_COLOR][1],
                      DEFAULT_BORDER_THICKNESS)


class BoothContext:
    """
    Todo el estado de la cabina en un solo objeto que se pasa a los
    manejadores de eventos y al paso de dibujo.
    - bounds: CaptureBounds del video dentro del lienzo.
    - catalog: {nombre: StampImage}.
    - style_source: función sin argumentos que devuelve un ShapeStyle.
    """

    def __init__(self, bounds, catalog=None, style_source=None):
        self.bounds = bounds
        self.catalog = catalog or {}
        self.style_source = style_source or default_style
        self.store = OverlayStore()
        self.state = InteractionState()
        self.filters = FilterState()


def reset(ctx):
    # Borra sellos y figuras y vuelve al filtro neutro
    ctx.store.reset()
    ctx.filters.reset()


def render_frame(ctx, frame, pointer=None, no_filter=False):
    """
    Arma el lienzo de un frame y lo devuelve (no modifica 'frame').
    Orden de dibujo:
    1) fondo gris y frame de la cámara centrado, con el filtro activo,
    2) vista previa del sello pendiente siguiendo al puntero,
    3) sellos confirmados, en orden,
    4) figuras confirmadas, en orden,
    5) la figura en progreso, arriba de todo.
    """
    bounds = ctx.bounds
    canvas = np.full((bounds.canvas_height, bounds.canvas_width, 3), BACKGROUND_GRAY, np.uint8)

    if frame.shape[:2] != (bounds.frame_height, bounds.frame_width):
        frame = cv2.resize(frame, (bounds.frame_width, bounds.frame_height))
    x0, y0 = bounds.origin
    canvas[y0:y0 + bounds.frame_height, x0:x0 + bounds.frame_width] = ctx.filters.apply(frame, no_filter)

    state = ctx.state
    if state.stamping and state.pending_stamp_image is not None and pointer is not None:
        draw_stamp(canvas, state.pending_stamp_image, pointer[0], pointer[1])

    for stamp in ctx.store.iter_stamps():
        draw_stamp(canvas, stamp.image, stamp.x, stamp.y)

    for shape in ctx.store.iter_shapes():
        draw_shape(canvas, shape)

    if state.in_progress_shape is not None and state.drawing_enabled:
        draw_shape(canvas, state.in_progress_shape)

    return canvas


def save_canvas_image(ctx, canvas, file_name=DEFAULT_SNAPSHOT):
    """Guarda sólo la zona del video (640x480) del lienzo y devuelve la ruta."""
    path = Path(file_name)
    region = ctx.bounds.crop(canvas)
    if not cv2.imwrite(str(path), region):
        raise IOError(f"No se pudo guardar {path}")
    logger.info("Foto guardada en %s", path)
    return path
