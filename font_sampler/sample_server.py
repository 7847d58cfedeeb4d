#!/usr/bin/env python3
"""Sample API server - serves handwriting sample extraction over HTTP.

Example:
    Run locally with debug logging::

        $ python3 sample_server.py --port 5000 --log-level DEBUG
"""

import argparse

from sample_flask import app, configure_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description='Handwriting sample extraction API')
    parser.add_argument('--host', default='127.0.0.1', help='Interface to bind')
    parser.add_argument('--port', type=int, default=5000, help='Port to listen on')
    parser.add_argument('--debug', action='store_true', help='Enable Flask debug mode')
    parser.add_argument('--log-level', default='INFO', help='DEBUG, INFO, WARNING or ERROR')
    parser.add_argument('--log-file', default=None, help='Also log to this file')
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_file=args.log_file)
    import sample_routes  # noqa: F401 - registers routes

    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == '__main__':
    main()
