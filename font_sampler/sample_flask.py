"""Flask application setup and request helpers for the sample API.

This module serves as the central configuration hub for the sample capture
web API. It provides:

    - The Flask application instance shared across route modules
    - Logging configuration
    - Global constants for canvas and preview sizes
    - Validation helpers returning ready-made error responses

Architecture:
    - sample_flask.py: App instance, config, and utilities (this module)
    - sample_routes.py: JSON routes for extraction, prompts and previews
    - sample_services.py: Business logic behind the routes
    - sample_server.py: Command-line entry point

Example:
    Import the Flask app and helpers::

        from sample_flask import app, parse_drawing_param

        @app.route('/my-route', methods=['POST'])
        def my_handler():
            drawing, err = parse_drawing_param(request.get_json())
            if err:
                return err
            ...

Attributes:
    app (Flask): The Flask application instance.
    DEFAULT_CANVAS_WIDTH (int): Canvas width assumed by capture screens (400).
    DEFAULT_CANVAS_HEIGHT (int): Canvas height assumed by capture screens (400).
    MAX_PREVIEW_SIZE (int): Largest preview width served, in pixels (1024).
    MAX_PROMPT_COUNT (int): Largest number of prompts served at once (20).
"""

import logging

from flask import Flask, jsonify

from sample_lib.domain import DrawingData, SampleFormatError

# Module logger
logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up structured logging with consistent format across all modules.
    Call this at application startup before importing route modules.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from sample_flask import configure_logging
            configure_logging(level='DEBUG', log_file='samples.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


# Flask application
app = Flask(__name__)

# --- Global constants ---
DEFAULT_CANVAS_WIDTH = 400
DEFAULT_CANVAS_HEIGHT = 400
MAX_PREVIEW_SIZE = 1024
MAX_PROMPT_COUNT = 20


def parse_drawing_param(data) -> tuple[DrawingData | None, tuple | None]:
    """Parse the ``drawing`` member of a JSON request body.

    Args:
        data: Decoded JSON body, may be None when the request had none.
            A drawing without width or height gets the default canvas size.

    Returns:
        tuple: (drawing, None) when valid, or (None, error_response) where
            error_response is a (flask.Response, 400) tuple ready to be
            returned from a route.

    Example:
        drawing, err = parse_drawing_param(request.get_json(silent=True))
        if err:
            return err
    """
    if not isinstance(data, dict) or 'drawing' not in data:
        return None, (jsonify(error="Missing drawing data"), 400)
    payload = data['drawing']
    if isinstance(payload, dict):
        payload = {'width': DEFAULT_CANVAS_WIDTH, 'height': DEFAULT_CANVAS_HEIGHT, **payload}
    try:
        return DrawingData.from_dict(payload), None
    except SampleFormatError as e:
        return None, (jsonify(error=str(e)), 400)


def validate_characters_param(characters) -> tuple[bool, tuple | None]:
    """Validate an expected-characters string from a request body.

    Returns:
        tuple: (True, None) if ``characters`` is a string, otherwise
            (False, error_response).
    """
    if not isinstance(characters, str):
        return False, (jsonify(error="Missing characters string"), 400)
    return True, None


def parse_flag(value: str | None, default: bool = False) -> bool:
    """Interpret a query-string flag such as ``?numbers=1``."""
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')
