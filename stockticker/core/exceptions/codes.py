"""Standardized error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every stockticker exception."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    DATA_FORMAT_ERROR = "DATA_FORMAT_ERROR"
    DATA_NOT_FOUND = "DATA_NOT_FOUND"
    DATA_VALIDATION_ERROR = "DATA_VALIDATION_ERROR"
