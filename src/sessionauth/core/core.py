from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, cast

from sessionauth.config import Config
from sessionauth.utils import Clock, now

if TYPE_CHECKING:
    from sessionauth.core.modules.credential.service import CredentialService
    from sessionauth.core.modules.session.service import SessionService
    from sessionauth.core.modules.token.service import TokenService


class Service:
    """Base class for in-memory services sharing config and clock."""

    def __init__(self, config: Config, clock: Clock = now) -> None:
        self.config = config
        self.clock = clock

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""


class Services:
    """Service registry that automatically discovers and initializes services."""

    credential: CredentialService
    token: TokenService
    session: SessionService

    def __init__(self, config: Config, clock: Clock = now) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        service_configs = [
            ("credential", "sessionauth.core.modules.credential.service", "CredentialService"),
            ("token", "sessionauth.core.modules.token.service", "TokenService"),
            ("session", "sessionauth.core.modules.session.service", "SessionService"),
        ]

        # Dynamically import and instantiate services
        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(config, clock)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, clock, and all service instances."""

    config: Config
    clock: Clock
    services: Services

    def __init__(self, config: Config, clock: Clock = now) -> None:
        """Initialize core with config and auto-register services."""
        self.config = config
        self.clock = clock
        self.services = Services(config, clock)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop all services on shutdown."""
        await self.services.stop_all()
