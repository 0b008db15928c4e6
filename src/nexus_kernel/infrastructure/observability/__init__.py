"""
Observability Infrastructure
Structured logging
"""
from nexus_kernel.infrastructure.observability.logger import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    setup_logging,
)

__all__ = [
    "configure_logging",
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
