"""
localized-settings - Main Entry Point

Supports CLI commands and API mode.
"""

import argparse
import json
import os
import sys
from typing import Any, List, Optional

from fastapi import FastAPI


def create_app() -> FastAPI:
    """
    Factory function to create FastAPI application.

    Called by uvicorn in factory mode to avoid import-time side effects when
    running CLI commands.

    Returns:
        FastAPI: Configured application instance
    """
    from localized_settings.api.factory import create_api
    from localized_settings.core.config import settings
    from localized_settings.core.logger import setup_logging

    setup_logging()

    return create_api(
        title=settings.api__title,
        description=settings.api__description,
        version=settings.api__version,
        docs_url=settings.api__docs_url,
        redoc_url=settings.api__redoc_url,
    )


def _parse_value(raw: str) -> Any:
    """Interpret CLI input as JSON when possible, otherwise as a plain string."""
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def run_get(key: str, language: Optional[str], field: Optional[str]) -> int:
    """Print a setting (or one of its fields) resolved for ``language``."""
    from localized_settings.services.settings_accessor import setting
    from localized_settings.stores.database import create_tables

    create_tables()
    accessor = setting(key, language)

    if field is not None:
        result = accessor.get_field(field)
    elif isinstance(accessor.raw_value, list):
        result = [
            item.to_dict() if hasattr(item, "to_dict") else item
            for item in accessor.get()
        ]
    else:
        result = accessor.to_raw()

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


def run_set(key: str, raw_value: str) -> int:
    """Save ``raw_value`` under ``key``."""
    from localized_settings.services.settings_accessor import setting
    from localized_settings.stores.database import create_tables

    create_tables()
    setting(key).save(_parse_value(raw_value))
    print(f"✅ Saved setting '{key}'")
    return 0


def run_init_db() -> int:
    """Create the settings table."""
    from localized_settings.stores.database import create_tables, test_connection

    test_connection()
    create_tables()
    print("✅ Database initialized")
    return 0


def run_api(host: str, port: int, reload: bool) -> int:
    """Serve the admin API with uvicorn."""
    import uvicorn

    from localized_settings.core.config import settings

    print("🚀 Starting localized-settings API Server...")
    print(f"📍 Server will run on {host}:{port}")
    print(f"🌍 Environment: {settings.environment}")
    print(f"🗣️  Default language: {settings.locale__default_language}")
    print(f"📚 API docs: http://{host}:{port}{settings.api__docs_url}")

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload or settings.debug,
        log_level=settings.log_level,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="localized-settings - localized key-value settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py set website '{"title": {"en": "Shop", "ar": "متجر"}}'
  python main.py get website --lang ar --field title
  python main.py init-db
  python main.py api --host 127.0.0.1 --port 3000
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Print a setting")
    get_parser.add_argument("key", help="Setting key")
    get_parser.add_argument("--lang", default=None, help="Resolution language")
    get_parser.add_argument("--field", default=None, help="Print only this field")

    set_parser = subparsers.add_parser("set", help="Save a setting")
    set_parser.add_argument("key", help="Setting key")
    set_parser.add_argument("value", help="JSON value, or plain text")

    subparsers.add_parser("init-db", help="Create the settings table")

    api_parser = subparsers.add_parser("api", help="Run the admin API server")
    api_parser.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Host to bind the API server (default: 0.0.0.0)",
    )
    api_parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8080")),
        help="Port to bind the API server (default: 8080)",
    )
    api_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point with CLI argument parsing.
    """
    args = build_parser().parse_args(argv)

    try:
        if args.command == "get":
            code = run_get(args.key, args.lang, args.field)
        elif args.command == "set":
            code = run_set(args.key, args.value)
        elif args.command == "init-db":
            code = run_init_db()
        else:
            code = run_api(args.host, args.port, args.reload)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        code = 0
    except Exception as e:
        print(f"❌ Error: {e}")
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
