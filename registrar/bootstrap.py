"""Shared initialisation for the MCP server, HTTP app and CLI."""

from __future__ import annotations

from contracts.audit import AuditLogger
from contracts.config import RegistrarConfig
from contracts.transport import Transport

from registrar.audit.logger import JsonlAuditLogger
from registrar.config_loader import load_config
from registrar.dispatch import ActionDispatcher
from registrar.registry import ToolRegistry, create_default_registry


class RegistrarComponents:
    """Container for initialised components."""

    def __init__(
        self,
        config: RegistrarConfig,
        registry: ToolRegistry,
        dispatcher: ActionDispatcher,
        logger: AuditLogger | None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.dispatcher = dispatcher
        self.logger = logger


def init_registrar(
    config_path: str | None = None,
    *,
    config: RegistrarConfig | None = None,
    transport: Transport | None = None,
) -> RegistrarComponents:
    """Load config and build the registry, dispatcher and audit logger.

    The registrar client is built lazily on the first call that needs
    it, so discovery works without credentials.
    """
    if config is None:
        config = load_config(config_path)

    logger = JsonlAuditLogger(config.audit.path) if config.audit.enabled else None
    registry = create_default_registry()

    def transport_factory() -> Transport:
        from registrar.client import get_client

        return get_client(config.api, audit=logger)

    dispatcher = ActionDispatcher(
        registry,
        transport,
        transport_factory=transport_factory,
        audit=logger,
        redact_arguments=config.audit.redact_arguments,
    )
    return RegistrarComponents(config=config, registry=registry, dispatcher=dispatcher, logger=logger)
