from .logger import LogMessage, LoggingContext, Logger


__all__ = [
    "LogMessage", "LoggingContext", "Logger",
]
