"""FutureUp structured logging entry point.

Application code imports ``get_module_logger`` from here; configuration
lives in ``infrastructure.logging``.
"""

from infrastructure.logging.setup import configure_logging, get_module_logger, logger

__all__ = ["configure_logging", "get_module_logger", "logger"]
