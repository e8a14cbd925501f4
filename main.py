#!/usr/bin/env python3
"""
Space Explorer Dashboard — launch the web UI.

Usage:
    python main.py                          # http://localhost:8000
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 127.0.0.1         # bind to localhost only
    python main.py --catalog-url http://localhost:9000/bodies
    python main.py --reload                 # auto-reload on code changes
"""

from __future__ import annotations

import argparse
import os
import sys
import webbrowser

from catalog.constants import DEFAULT_CATALOG_URL


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Launch the Space Explorer dashboard.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "8000")),
        help="Port to listen on (default: 8000 or APP_PORT env var)",
    )
    parser.add_argument(
        "--catalog-url", default=None,
        help="Catalogue endpoint (default: Solar System OpenData API or CATALOG_URL env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    parser.add_argument(
        "--no-browser", action="store_true",
        help="Don't open a browser window automatically",
    )
    args = parser.parse_args()

    # api.app reads its config from the environment at import time
    if args.catalog_url is not None:
        os.environ["CATALOG_URL"] = args.catalog_url

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn is not installed.")
        print("  pip install uvicorn[standard]")
        sys.exit(1)

    url = f"http://{'localhost' if args.host == '0.0.0.0' else args.host}:{args.port}"
    print(f"Starting Space Explorer at {url}")
    print(f"Catalogue: {os.getenv('CATALOG_URL', DEFAULT_CATALOG_URL)}")
    print()

    if not args.no_browser:
        # Open browser after a short delay to let the server start
        import threading
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
