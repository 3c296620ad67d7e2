from tfcsv.monitoring.logging import LOGGER_NAME, JsonFormatter, configure_logging

__all__ = [
    "configure_logging",
    "JsonFormatter",
    "LOGGER_NAME",
]
