"""
Panel de controles de la cabina hecho con lo que ofrece HighGUI de OpenCV:
trackbars en una ventana aparte en lugar de sliders/color pickers, y
atajos de teclado en lugar de botones.

Teclas:
  i / b / p / g   filtro invertir / desenfoque / posterizar / grises
  r / e           dibujar rectángulos / elipses
  1 / 2 / 3 / 4   sello gafas / sombrero / bigote / barba de Papá Noel
  c               borrar todo y volver al filtro neutro
  ESPACIO         guardar la foto
  ESC             salir
"""
import logging

import cv2

from booth import ShapeStyle, reset
from config import (PALETTE, PANEL_NAME, DEFAULT_BORDER_COLOR, DEFAULT_FILL_COLOR,
                    DEFAULT_BORDER_THICKNESS, MAX_BORDER_THICKNESS, ESC, SPACEBAR)
from interaction import (LEFT, RIGHT, on_mode_select_shape, on_mode_select_stamp_name,
                         on_pointer_press, on_pointer_drag, on_pointer_release, on_pointer_click)
from shapes import BORDER_NONE, ShapeKind

logger = logging.getLogger(__name__)

TRACKBAR_THICKNESS = "Borde"
TRACKBAR_BORDER_COLOR = "Color borde"
TRACKBAR_FILL_COLOR = "Color relleno"
TRACKBAR_NO_FILTER = "Sin filtro"

KEY_ACTIONS = {
    ord("i"): ("filter", "invert"),
    ord("b"): ("filter", "blur"),
    ord("p"): ("filter", "posterize"),
    ord("g"): ("filter", "gray"),
    ord("r"): ("shape", ShapeKind.RECTANGLE),
    ord("e"): ("shape", ShapeKind.ELLIPSE),
    ord("1"): ("stamp", "glasses"),
    ord("2"): ("stamp", "hat"),
    ord("3"): ("stamp", "moustache"),
    ord("4"): ("stamp", "santa"),
    ord("c"): ("reset", None),
    SPACEBAR: ("save", None),
    ESC: ("quit", None),
}


def style_from_positions(thickness, border_index, fill_index):
    # Posición 0 del trackbar de grosor es "None" (sin borde)
    border_thickness = BORDER_NONE if thickness <= 0 else int(thickness)
    border_index = min(max(border_index, 0), len(PALETTE) - 1)
    fill_index = min(max(fill_index, 0), len(PALETTE) - 1)
    return ShapeStyle(PALETTE[border_index][1], PALETTE[fill_index][1], border_thickness)


def _noop(_value):
    pass


class ControlPanel:
    """Ventana con los trackbars; se leen cada vez que hace falta un valor."""

    def __init__(self, window_name=PANEL_NAME):
        self.window_name = window_name
        cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
        cv2.createTrackbar(TRACKBAR_THICKNESS, window_name, DEFAULT_BORDER_THICKNESS,
                           MAX_BORDER_THICKNESS, _noop)
        cv2.createTrackbar(TRACKBAR_BORDER_COLOR, window_name, DEFAULT_BORDER_COLOR,
                           len(PALETTE) - 1, _noop)
        cv2.createTrackbar(TRACKBAR_FILL_COLOR, window_name, DEFAULT_FILL_COLOR,
                           len(PALETTE) - 1, _noop)
        cv2.createTrackbar(TRACKBAR_NO_FILTER, window_name, 0, 1, _noop)

    def _pos(self, name):
        return cv2.getTrackbarPos(name, self.window_name)

    def style(self):
        return style_from_positions(self._pos(TRACKBAR_THICKNESS),
                                    self._pos(TRACKBAR_BORDER_COLOR),
                                    self._pos(TRACKBAR_FILL_COLOR))

    def no_filter(self):
        return self._pos(TRACKBAR_NO_FILTER) == 1


def handle_key(ctx, key):
    """
    Ejecuta la acción de la tecla sobre el contexto y la devuelve como
    (tipo, valor). Guardar y salir dependen del bucle principal, así que
    acá sólo se informan. Teclas sin acción devuelven None.
    """
    action = KEY_ACTIONS.get(key)
    if action is None:
        return None

    kind, value = action
    if kind == "filter":
        ctx.filters.select(value)
    elif kind == "shape":
        on_mode_select_shape(ctx, value)
    elif kind == "stamp":
        on_mode_select_stamp_name(ctx, value)
    elif kind == "reset":
        reset(ctx)
    return action


class MouseRouter:
    """
    Traduce los eventos de cv2.setMouseCallback a los manejadores de
    interaction. Recuerda la última posición del puntero para la vista
    previa del sello.
    """

    def __init__(self, ctx):
        self.ctx = ctx
        self.pointer = None

    def __call__(self, event, x, y, flags, param=None):
        self.pointer = (x, y)
        if event == cv2.EVENT_LBUTTONDOWN:
            on_pointer_press(self.ctx, x, y, LEFT)
        elif event == cv2.EVENT_RBUTTONDOWN:
            on_pointer_press(self.ctx, x, y, RIGHT)
        elif event == cv2.EVENT_MOUSEMOVE and flags & cv2.EVENT_FLAG_LBUTTON:
            on_pointer_drag(self.ctx, x, y)
        elif event == cv2.EVENT_LBUTTONUP:
            # Soltar el botón cierra la figura y además cuenta como clic
            on_pointer_release(self.ctx)
            on_pointer_click(self.ctx, x, y)


def draw_hud(canvas, ctx):
    state = ctx.state
    lines = [f"Filtro: {ctx.filters.active}"]
    if state.drawing_enabled:
        lines.append(f"Figura: {state.pending_shape_kind.value}")
    if state.stamping and state.pending_stamp_image is not None:
        lines.append(f"Sello: {state.pending_stamp_image.name} (clic sobre el video)")
    lines.append(f"Sellos: {ctx.store.stamp_count}  Figuras: {ctx.store.shape_count}")

    y = 24
    for line in lines:
        cv2.putText(canvas, line, (10, y), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (255, 255, 255), 1, cv2.LINE_AA)
        y += 22

    help_text = "i/b/p/g filtros  r/e figuras  1-4 sellos  c borrar  ESPACIO guardar  ESC salir"
    cv2.putText(canvas, help_text, (10, canvas.shape[0] - 12), cv2.FONT_HERSHEY_SIMPLEX,
                0.5, (255, 255, 255), 1, cv2.LINE_AA)
    return canvas
