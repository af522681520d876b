from .logger import ColoredFormatter, JSONFormatter, configure_logging, configure_logging_from_settings

__all__ = ["ColoredFormatter", "JSONFormatter", "configure_logging", "configure_logging_from_settings"]
