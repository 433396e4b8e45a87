#!/usr/bin/env python3
"""
Attendance Notifier Runner
==========================

Runs the notifier service under uvicorn.

Usage:
    python run_app.py                    # Serve on $PORT (default 10000)
    python run_app.py --port 8001        # Custom port
    python run_app.py --host 127.0.0.1   # Custom host
    python run_app.py --reload           # Development mode with auto-reload
"""

import argparse
import sys

from app.core.config import settings

def run_app(host: str, port: int, reload: bool = False):
    """Run the FastAPI application"""
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower()
    )

def main():
    parser = argparse.ArgumentParser(
        description="Attendance Notifier Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "--host",
        default=settings.HOST,
        help=f"Host to bind to (default: {settings.HOST})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help=f"Port to bind to (default: {settings.PORT})"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload"
    )

    args = parser.parse_args()
    run_app(args.host, args.port, args.reload)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
