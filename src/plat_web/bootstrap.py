"""
Web entry point for the Fifths Wheel.

Run from the src/ directory:
    python -m plat_web.bootstrap --port 5000 --notation english
"""
import argparse

from fifths_wheel.constants import Notation, Server

from .app import create_app
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve the circle-of-fifths wheel API.")
    parser.add_argument("--host", default=Server.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=Server.PORT, help="Port to listen on")
    parser.add_argument(
        "--notation",
        choices=Notation.ALL,
        default=Notation.DEFAULT,
        help="Initial note-naming convention",
    )
    parser.add_argument(
        "--log-level",
        default=Server.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for the wheel loggers",
    )
    parser.add_argument("--debug", action="store_true", help="Microdot debug output")
    return parser.parse_args(argv)


def main(argv=None):
    """Parse arguments, configure logging and run the server."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    app = create_app(notation=args.notation)

    print("========================================")
    print("  FIFTHS WHEEL READY")
    print("========================================")
    print("GET  /api/wheel        current frame")
    print("POST /api/drag/start   pointer down")
    print("POST /api/drag         {angle} or {x, y}")
    print("POST /api/drag/end     release (snaps)")
    print("POST /api/key          {index}")
    print("POST /api/step         {delta}")
    print("POST /api/reset")
    print("POST /api/notation     {notation}")
    print("WS   /ws               {action, ...}")
    print("========================================")

    logger.info("Starting server on %s:%d", args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nServer stopped.")


if __name__ == "__main__":
    main()
