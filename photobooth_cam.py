import argparse
import logging

import cv2

from booth import BoothContext, render_frame, save_canvas_image
from config import CANVAS_WIDTH, CANVAS_HEIGHT, DEFAULT_SNAPSHOT, WINDOW_NAME
from control_panel import ControlPanel, MouseRouter, draw_hud, handle_key
from frame_bounds import CaptureBounds
from stamps import load_stamp_catalog


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Cabina de fotos con filtros, sellos y figuras")
    parser.add_argument("--camera", type=int, default=0, help="índice de la cámara (0, 1, 2...)")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH, help="ancho del lienzo")
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT, help="alto del lienzo")
    parser.add_argument("--assets", default=".", help="carpeta que contiene assets/")
    parser.add_argument("--output", default=DEFAULT_SNAPSHOT, help="archivo de la foto guardada")
    parser.add_argument("--verbose", action="store_true", help="mostrar mensajes de depuración")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Bucle de la cabina: leer frame, armar el lienzo, mostrarlo y atender
    el teclado. Mouse y trackbars llegan por callbacks de OpenCV entre
    una llamada a waitKey y la siguiente, en el mismo hilo.
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        bounds = CaptureBounds(args.width, args.height)
    except ValueError as exc:
        raise SystemExit(str(exc))

    catalog = load_stamp_catalog(base_dir=args.assets)

    cap = cv2.VideoCapture(args.camera)
    if not cap.isOpened():
        raise SystemExit("No se pudo abrir la cámara")

    cv2.namedWindow(WINDOW_NAME, cv2.WINDOW_AUTOSIZE)
    panel = ControlPanel()
    ctx = BoothContext(bounds, catalog, style_source=panel.style)
    mouse = MouseRouter(ctx)
    cv2.setMouseCallback(WINDOW_NAME, mouse)

    print("Presiona ESC para salir, ESPACIO para guardar la foto")

    try:
        while True:
            ok, frame = cap.read()
            if not ok:
                break

            # La casilla "Sin filtro" se lee una sola vez por frame
            canvas = render_frame(ctx, frame, mouse.pointer, panel.no_filter())
            shown = draw_hud(canvas.copy(), ctx)
            cv2.imshow(WINDOW_NAME, shown)

            key = cv2.waitKey(1) & 0xFF
            action = handle_key(ctx, key)
            if action is None:
                continue
            if action[0] == "save":
                # Se guarda el lienzo sin el texto de ayuda
                path = save_canvas_image(ctx, canvas, args.output)
                print(f"Listo: {path}")
            elif action[0] == "quit":
                break
    finally:
        cap.release()
        cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
