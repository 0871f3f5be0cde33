from textmapper.core.exceptions import (
    AppException,
    ConfigurationException,
    MappingStateException,
    TemplateCompilationException,
    ValidationException,
)
from textmapper.core.logging import setup_logging, get_logger

__all__ = [
    "AppException",
    "ConfigurationException",
    "MappingStateException",
    "TemplateCompilationException",
    "ValidationException",
    "setup_logging",
    "get_logger",
]
