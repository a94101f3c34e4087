import argparse
import importlib
import importlib.util
import logging
from pathlib import Path

from .app import App

logger = logging.getLogger(__name__)


def load_app(target: str) -> App:
    """Load ``module:attr`` where module is an import path or a ``.py`` file."""
    module_path, _, app_name = target.partition(":")
    app_name = app_name or "app"

    path = Path(module_path).resolve()
    if path.is_file():
        spec = importlib.util.spec_from_file_location("app_module", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    else:
        module = importlib.import_module(module_path)

    app = getattr(module, app_name)
    if not isinstance(app, App):
        raise TypeError(f"{target} is not a semantic_apps.App instance")
    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a semantic app server")
    parser.add_argument("app", help='Application import path or file (e.g. "myapp.main:app")')
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to (default: 8000)")
    parser.add_argument("--dev", action="store_true", help="Show tracebacks on error pages")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig()

    app = load_app(args.app)
    app.log_level = args.log_level
    app.dev = app.dev or args.dev
    logger.info(f"Serving {args.app} on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
