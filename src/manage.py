"""Sokobo management CLI.

Usage:
    python src/manage.py serve [--host 0.0.0.0] [--port 8000] [--reload]
    python src/manage.py show-settings
"""

import argparse
import json
import sys


def serve(host, port, reload):
    """Run the API under uvicorn."""
    import uvicorn

    uvicorn.run("app:app", host=host, port=port, reload=reload)


def show_settings():
    """Print the effective settings with secrets masked."""
    from sokobo.config import get_settings

    print(json.dumps(get_settings().public_view(), indent=2))


def main():
    parser = argparse.ArgumentParser(description="Sokobo storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("show-settings", help="Print effective settings")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port, args.reload)
    elif args.command == "show-settings":
        show_settings()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
