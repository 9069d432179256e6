"""Container bootstrap."""

import logging
from collections.abc import Mapping
from typing import Any

from wirebox.core.container import Container
from wirebox.utils.config import Config
from wirebox.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_container(
    config: Config | None = None,
    services: Mapping[str, Any] | None = None,
) -> Container:
    """Create and configure a container.

    Args:
        config: Settings to use; loaded from disk and environment if omitted
        services: Initial registrations, passed to ``Container.register``

    Returns:
        The configured container
    """
    if config is None:
        config = Config.from_env()
    setup_logging(config.log_level)

    container = Container(
        thread_safe=config.thread_safe,
        detect_cycles=config.detect_cycles,
    )
    for key, value in (services or {}).items():
        container.register(key, value)

    logger.info("Container ready with %d services", container.count())
    return container
