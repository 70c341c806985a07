"""
Máquina de estados de la interacción con el mouse.

Hay dos sub-máquinas independientes que comparten los mismos eventos:

- Figuras: Idle -> armada para un tipo (botón "Rectángulo"/"Elipse") ->
  dibujando (presión dentro del video) -> armada otra vez al soltar.
  El tipo queda armado, así que la próxima presión empieza otra figura.
- Sellos: Idle -> armada con una imagen -> un clic dentro del video pega
  el sello y vuelve a Idle. Un clic fuera del video no pega nada y deja
  el sello pendiente.

Los manejadores reciben el contexto de la cabina (ver booth.BoothContext)
y sólo tocan ctx.state y ctx.store.
"""
import logging

from shapes import Shape
from stamps import Stamp

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


class InteractionState:

    def __init__(self):
        self.drawing_enabled = False
        self.pending_shape_kind = None
        self.stamping = False
        self.pending_stamp_image = None
        self.in_progress_shape = None

    def __repr__(self):
        kind = self.pending_shape_kind.value if self.pending_shape_kind else None
        image = self.pending_stamp_image.name if self.pending_stamp_image else None
        return (f"InteractionState(drawing={self.drawing_enabled}, kind={kind}, "
                f"stamping={self.stamping}, image={image}, "
                f"in_progress={self.in_progress_shape is not None})")


def on_mode_select_shape(ctx, kind):
    """
    Arma el dibujo de figuras del tipo 'kind' (botones Rectángulo/Elipse).
    Volver a elegir el tipo ya armado no cambia nada.
    """
    state = ctx.state
    if state.drawing_enabled and state.pending_shape_kind is kind:
        return
    state.drawing_enabled = True
    state.pending_shape_kind = kind
    # Al cambiar de tipo se abandona la figura a medio dibujar
    state.in_progress_shape = None
    logger.debug("Modo figura: %s", kind.value)


def on_mode_select_stamp(ctx, image):
    # Siempre (re)arma, aunque haya una figura armada: son independientes
    ctx.state.stamping = True
    ctx.state.pending_stamp_image = image
    logger.debug("Modo sello: %s", image.name)


def on_mode_select_stamp_name(ctx, name):
    """
    Arma el sello por nombre ("glasses", "hat", "moustache", "santa").
    Un nombre que no está en el catálogo no cambia nada; es un error de
    configuración, no algo que el usuario pueda provocar.
    """
    image = ctx.catalog.get(name)
    if image is None:
        logger.warning("Sello desconocido: %r", name)
        return
    on_mode_select_stamp(ctx, image)


def on_pointer_press(ctx, x, y, button=LEFT):
    """
    Empieza una figura en (x, y) con tamaño cero. Sólo con el botón
    izquierdo, con un tipo armado y dentro del video; si no, no hace nada.
    """
    state = ctx.state
    if not state.drawing_enabled or button != LEFT:
        return
    if not ctx.bounds.contains(x, y):
        logger.debug("Presión fuera del video en (%s, %s)", x, y)
        return
    # El estilo se toma del panel en el momento de crear la figura
    style = ctx.style_source()
    state.in_progress_shape = Shape(x, y, 0, 0, state.pending_shape_kind,
                                    style.border_color, style.fill_color,
                                    style.border_thickness)


def on_pointer_drag(ctx, x, y):
    """Estira la figura en progreso hasta (x, y), sin recortar extensiones negativas."""
    state = ctx.state
    if state.in_progress_shape is not None and state.drawing_enabled:
        state.in_progress_shape.resize_to(x, y)


def on_pointer_release(ctx):
    """Confirma la figura en progreso en el store; el tipo sigue armado."""
    state = ctx.state
    if state.in_progress_shape is not None and state.drawing_enabled:
        ctx.store.add_shape(state.in_progress_shape)
        state.in_progress_shape = None


def on_pointer_click(ctx, x, y):
    """
    Pega el sello pendiente en (x, y) y desarma el modo sello.
    Fuera del video el clic se ignora y el sello sigue pendiente.
    """
    state = ctx.state
    if not state.stamping:
        return
    if not ctx.bounds.contains(x, y):
        # Se rechaza el clic pero el sello sigue pendiente
        logger.debug("Clic fuera del video en (%s, %s), sello pendiente", x, y)
        return
    ctx.store.add_stamp(Stamp(state.pending_stamp_image, x, y))
    state.stamping = False
