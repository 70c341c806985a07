# Constantes compartidas por la cabina de fotos.
# Todas las medidas están en píxeles y los colores en BGR (orden de OpenCV).

# Tamaño fijo del frame de la cámara dentro del lienzo
VIDEO_WIDTH = 640
VIDEO_HEIGHT = 480

# Tamaño con el que se dibuja cada sello (stamp)
IMG_WIDTH = 170
IMG_HEIGHT = 150

# Lienzo completo: el frame se centra dentro de él
CANVAS_WIDTH = 960
CANVAS_HEIGHT = 720
BACKGROUND_GRAY = 150

WINDOW_NAME = "Cabina de fotos (ESC para salir)"
PANEL_NAME = "Controles"

# PNG con canal alpha para cada sello
STAMP_ASSETS = {
    "glasses": "assets/glasses.png",
    "hat": "assets/hat.png",
    "moustache": "assets/moustache.png",
    "santa": "assets/santa-claus.png",
}

# Paleta que hace de "color picker" en el panel de controles
PALETTE = [
    ("negro", (0, 0, 0)),
    ("blanco", (255, 255, 255)),
    ("rojo", (0, 0, 255)),
    ("verde", (0, 200, 0)),
    ("azul", (255, 80, 0)),
    ("amarillo", (0, 220, 255)),
    ("magenta", (190, 70, 190)),
    ("naranja", (40, 140, 250)),
]
DEFAULT_BORDER_COLOR = 0   # índice en PALETTE
DEFAULT_FILL_COLOR = 5

# Grosor de borde: 0 en el trackbar equivale a "None"
MAX_BORDER_THICKNESS = 20
DEFAULT_BORDER_THICKNESS = 3

# Parámetros de los filtros
BLUR_RADIUS = 4
POSTERIZE_LEVELS = 4

# Teclas
ESC = 27
SPACEBAR = 32

DEFAULT_SNAPSHOT = "canvas_image.png"
