from config import VIDEO_WIDTH, VIDEO_HEIGHT


class CaptureBounds:
    """
    Rectángulo del frame de la cámara centrado dentro del lienzo.
    Sirve para decidir si un clic cae sobre el video: fuera de él no se
    permite crear figuras ni pegar sellos.
    """

    def __init__(self, canvas_width, canvas_height, frame_width=VIDEO_WIDTH, frame_height=VIDEO_HEIGHT):
        if frame_width > canvas_width or frame_height > canvas_height:
            raise ValueError(
                f"El frame {frame_width}x{frame_height} no entra en el lienzo {canvas_width}x{canvas_height}"
            )
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.frame_width = frame_width
        self.frame_height = frame_height

    @property
    def origin(self):
        # Esquina superior izquierda del frame en coordenadas de lienzo
        return ((self.canvas_width - self.frame_width) // 2,
                (self.canvas_height - self.frame_height) // 2)

    def contains(self, x, y):
        # Intervalo semiabierto: el borde izquierdo/superior entra, el derecho/inferior no.
        # Los bordes salen de origin, que es donde se pega el frame; con una
        # diferencia impar de tamaños la mitad exacta caería medio píxel corrida.
        left, top = self.origin
        return left <= x < left + self.frame_width and top <= y < top + self.frame_height

    def crop(self, canvas):
        x0, y0 = self.origin
        return canvas[y0:y0 + self.frame_height, x0:x0 + self.frame_width]
