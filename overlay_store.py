import logging

logger = logging.getLogger(__name__)


class OverlayStore:
    """
    Sellos y figuras confirmados, en orden de inserción.
    El orden de inserción es también el orden de dibujo: lo último queda arriba.
    No hay borrado individual; sólo reset() vacía todo.
    """

    def __init__(self):
        self._stamps = []
        self._shapes = []

    def add_stamp(self, stamp):
        self._stamps.append(stamp)
        logger.debug("Sello %s pegado en (%s, %s)", stamp.image.name, stamp.x, stamp.y)

    def add_shape(self, shape):
        # Una figura confirmada ya no se modifica
        shape.freeze()
        self._shapes.append(shape)
        logger.debug("Figura confirmada: %r", shape)

    def iter_stamps(self):
        # Generador nuevo en cada llamada, así se puede recorrer una vez por frame
        return (stamp for stamp in self._stamps)

    def iter_shapes(self):
        return (shape for shape in self._shapes)

    @property
    def stamp_count(self):
        return len(self._stamps)

    @property
    def shape_count(self):
        return len(self._shapes)

    def reset(self):
        """Vacía sellos y figuras. El filtro lo vuelve a neutro booth.reset."""
        self._stamps = []
        self._shapes = []
        logger.debug("Sellos y figuras borrados")
