import cv2
from enum import Enum

# Valor del combo de grosor que significa "sin borde"
BORDER_NONE = "None"


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"

    @classmethod
    def parse(cls, tag):
        try:
            return cls(tag)
        except ValueError:
            raise ValueError(f"Tipo de figura desconocido: {tag!r}") from None


class Shape:
    """
    Rectángulo o elipse dibujado por el usuario.
    - (x, y) es el punto donde se presionó el mouse y no cambia.
    - w, h son extensiones con signo: negativas si se arrastró hacia
      la izquierda/arriba del origen.
    - border_thickness es BORDER_NONE o un entero positivo.
    Mientras se arrastra la figura está "en progreso"; al soltar se congela.
    """

    def __init__(self, x, y, w, h, kind, border_color, fill_color, border_thickness):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.kind = kind
        self.border_color = border_color
        self.fill_color = fill_color
        self.border_thickness = border_thickness
        self.frozen = False

    def resize_to(self, x, y):
        if self.frozen:
            raise RuntimeError("La figura ya fue confirmada y no se puede modificar")
        # Sin recortes: el arrastre puede dejar extensiones negativas
        self.w = x - self.x
        self.h = y - self.y

    def freeze(self):
        self.frozen = True

    def bounding_box(self):
        x0, x1 = sorted((self.x, self.x + self.w))
        y0, y1 = sorted((self.y, self.y + self.h))
        return int(x0), int(y0), int(x1), int(y1)

    def __repr__(self):
        return (f"Shape({self.kind.value}, x={self.x}, y={self.y}, w={self.w}, h={self.h}, "
                f"border={self.border_thickness})")


def draw_shape(canvas, shape):
    """
    Dibuja la figura sobre el lienzo (in-place).
    Se usa la misma rutina para la vista previa y para las figuras
    confirmadas, así la figura no "salta" al soltar el mouse.
    El relleno va primero y el borde encima; con BORDER_NONE no hay borde.
    """
    x0, y0, x1, y1 = shape.bounding_box()

    if shape.kind is ShapeKind.RECTANGLE:
        cv2.rectangle(canvas, (x0, y0), (x1, y1), shape.fill_color, thickness=-1)
        if shape.border_thickness != BORDER_NONE:
            cv2.rectangle(canvas, (x0, y0), (x1, y1), shape.border_color,
                          thickness=int(shape.border_thickness))
    elif shape.kind is ShapeKind.ELLIPSE:
        # Elipse inscripta en la caja que va del punto de presión al de soltado
        center = ((x0 + x1) // 2, (y0 + y1) // 2)
        axes = ((x1 - x0) // 2, (y1 - y0) // 2)
        cv2.ellipse(canvas, center, axes, 0, 0, 360, shape.fill_color, thickness=-1)
        if shape.border_thickness != BORDER_NONE:
            cv2.ellipse(canvas, center, axes, 0, 0, 360, shape.border_color,
                        thickness=int(shape.border_thickness))
    return canvas
