"""
Application entry points for the blog API service.

Usage:
    # Run FastAPI server (production - uses Granian)
    python main.py api

    # Run FastAPI server (development - uses Uvicorn with hot-reload)
    python main.py api --dev
"""

from __future__ import annotations

import argparse
import sys


def run_api_granian() -> int:
    """Run the FastAPI application with Granian."""
    try:
        from granian import Granian
        from granian.constants import Interfaces

        from blog_api.config import get_settings

        settings = get_settings()
        server_settings = settings.server

        print(
            f"Starting Granian server on {server_settings.host}:{server_settings.port} "
            f"with {server_settings.workers} workers..."
        )

        server = Granian(
            target="blog_api.api.main:app",
            address=server_settings.host,
            port=server_settings.port,
            workers=server_settings.workers,
            interface=Interfaces.ASGI,
            log_level="info" if not settings.app.debug else "debug",
        )
        server.serve()
        return 0
    except ImportError as exc:
        print(f"Error: {exc}. Install with: pip install '.[server]'", file=sys.stderr)
        return 1


def run_api_uvicorn() -> int:
    """Run the FastAPI application with Uvicorn (development, with hot-reload)."""
    import uvicorn

    from blog_api.config import get_settings

    settings = get_settings()
    server_settings = settings.server

    print(f"Starting Uvicorn dev server on {server_settings.host}:{server_settings.port}...")

    uvicorn.run(
        "blog_api.api.main:app",
        host=server_settings.host,
        port=server_settings.port,
        reload=True,
        log_level="debug" if settings.app.debug else "info",
    )
    return 0


def main() -> int:
    """Main entry point with subcommand routing."""
    parser = argparse.ArgumentParser(
        description="Blog API Service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    api_parser = subparsers.add_parser("api", help="Run FastAPI server")
    api_parser.add_argument(
        "--dev",
        action="store_true",
        help="Use Uvicorn with hot-reload (development mode)",
    )

    args = parser.parse_args()

    if args.command == "api":
        if args.dev:
            return run_api_uvicorn()
        return run_api_granian()

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
