"""Application entry point and composition root."""

import argparse

import structlog

from authzman import __version__
from authzman.application.ports import ConfigurationStore
from authzman.application.services import AuthorizationManager
from authzman.config import Settings, get_settings
from authzman.infrastructure.events import InMemoryChangeNotifier, log_configuration_changed
from authzman.infrastructure.persistence.memory import InMemoryConfigurationStore
from authzman.infrastructure.persistence.postgres import (
    PostgresConfigurationStore,
    create_pool,
)
from authzman.infrastructure.privileges import (
    RulePrivilegeInheritanceResolver,
    create_default_registry,
)
from authzman.interfaces.api.app import create_app
from authzman.interfaces.api.middleware.cors import CORSMiddleware
from authzman.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from authzman.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def create_authzman_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    middleware: list = [
        CORSMiddleware([o.strip() for o in settings.cors_origins.split(",") if o.strip()])
    ]
    store: ConfigurationStore
    if settings.database_url:
        pool = create_pool(settings.database_url)
        store = PostgresConfigurationStore(pool)
        middleware.append(PoolLifespanMiddleware(pool))
    else:
        store = InMemoryConfigurationStore()

    notifier = InMemoryChangeNotifier()
    notifier.subscribe(log_configuration_changed)
    registry = create_default_registry()
    manager = AuthorizationManager(
        configuration=store,
        privilege_inheritance=RulePrivilegeInheritanceResolver(),
        notifier=notifier,
        registry=registry,
        source=settings.source,
    )
    logger.info(
        "app_created",
        store=type(store).__name__,
        privilege_types=registry.types(),
        environment=settings.environment,
    )
    return create_app(manager, registry, store, middleware=middleware)


def run_server(settings: Settings) -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_authzman_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="authzman", description="Authorization configuration manager")
    parser.add_argument("command", nargs="?", choices=["version", "serve"], default="version")
    args = parser.parse_args(argv)

    if args.command == "serve":
        settings = get_settings()
        configure_logging(settings.log_level, use_json=settings.log_json)
        run_server(settings)
        return
    print(f"authzman v{__version__}")
