import logging
import sys


def setup_logging(level="INFO"):
    """
    Configura un handler a stderr para toda la aplicación. Si el root
    logger ya tiene handlers (servidor WSGI, pytest) solo ajusta el nivel.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
