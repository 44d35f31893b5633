"""stockticker core exceptions."""

from typing import Any

from stockticker.core.exceptions.codes import ErrorCode


class StockTickerError(Exception):
    """Base class for every stockticker error."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: Human readable error message
            error_code: Standardized error code
            details: Extra structured details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(StockTickerError):
    """Process configuration is missing or malformed."""

    def __init__(
        self,
        message: str,
        variable: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if variable:
            super_details["variable"] = variable
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, super_details)
        self.variable = variable


class ProviderError(StockTickerError):
    """Failure talking to, or understanding, the data provider."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        error_code: ErrorCode = ErrorCode.PROVIDER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, error_code, details)
        self.provider_name = provider_name


class TransportError(ProviderError):
    """The outbound call itself failed (connection, DNS, timeout)."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, provider_name, ErrorCode.NETWORK_ERROR, details)


class DecodeError(ProviderError):
    """The response body is not JSON of the expected shape."""

    def __init__(
        self,
        message: str,
        provider_name: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, provider_name, ErrorCode.DATA_FORMAT_ERROR, details)


class NoDataError(ProviderError):
    """The provider answered without a time series (e.g. unknown symbol)."""

    def __init__(
        self,
        provider_name: str,
        message: str = "no time series data returned",
        provider_message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if provider_message:
            super_details["provider_message"] = provider_message
        super().__init__(message, provider_name, ErrorCode.DATA_NOT_FOUND, super_details)
        self.provider_message = provider_message


class FieldParseError(StockTickerError):
    """A single field of a single record could not be coerced."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if field:
            super_details["field"] = field
        super_details["value"] = value
        super().__init__(message, ErrorCode.DATA_VALIDATION_ERROR, super_details)
        self.field = field
        self.value = value
