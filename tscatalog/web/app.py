"""FastAPI application serving catalog lookups over HTTP."""

from typing import Optional

import uvicorn
from fastapi import FastAPI

from ..config import config, configure_logging
from ..services.catalog_manager import CatalogManager
from ..services.locator import CatalogLocator
from .routes import api


def create_manager() -> CatalogManager:
    """Build a manager from configuration and load the configured language."""
    manager = CatalogManager(
        locator=CatalogLocator(config.search_dirs),
        catalog_names=config.catalog_names,
    )
    manager.switch_language(config.language)
    return manager


def create_app(manager: Optional[CatalogManager] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="tscatalog",
        description="Translation catalog lookups",
        version="0.1.0",
    )

    # Store services in app state
    app.state.catalog_manager = manager or create_manager()

    app.include_router(api.router, prefix="/api")

    return app


def main():
    """Entry point for the tscatalog-web command."""
    import argparse

    parser = argparse.ArgumentParser(description="Serve translation catalog lookups")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--log-level", default=None, help="Log level")

    args = parser.parse_args()

    configure_logging(args.log_level)
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}")
        raise SystemExit(1)

    print(f"Starting tscatalog at http://{args.host}:{args.port}")
    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
