import warnings
from typing import TYPE_CHECKING, Any, Dict, Optional

from .config import settings

if TYPE_CHECKING:
    from ..schemas.transaction import CommandTransaction, ErrorContext
    from ..services.api_model import ApiModel


class CommandError(Exception):
    """
    Generic failure raised by the command pipeline. Carries the transaction
    and the client that executed the command, but no service identity.
    """
    def __init__(
        self,
        message: str,
        transaction: "CommandTransaction",
        *,
        client: Any = None,
        previous: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.transaction = transaction
        self.client = client
        self.previous = previous

    def get_context(self) -> "ErrorContext":
        return self.transaction.context


class InvalidOriginError(TypeError):
    """Raised when a failure did not come from an AwsClientInterface."""


class ServiceError(Exception):
    """
    Service-specific error built from a CommandError.

    Holds the original failure as ``cause`` (and ``__cause__``) instead of
    extending it. Optional fields are None when the service sent no
    structured error, e.g. on networking failures.
    """
    def __init__(
        self,
        message: str,
        *,
        cause: CommandError,
        request_id: Optional[str] = None,
        error_type: Optional[str] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self._message = message
        self._cause = cause
        self._request_id = request_id
        self._error_type = error_type
        self._error_code = error_code
        self.__cause__ = cause

    def __str__(self) -> str:
        return self._message

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> CommandError:
        return self._cause

    @property
    def transaction(self) -> "CommandTransaction":
        return self._cause.transaction

    def get_context(self) -> "ErrorContext":
        return self._cause.get_context()

    def get_status_code(self) -> Optional[int]:
        return self._cause.transaction.status_code

    def get_api(self) -> "ApiModel":
        """Service description model of the client that failed."""
        return self._cause.client.get_api()

    def get_service_name(self) -> str:
        """Endpoint prefix of the service, read from the client on each call."""
        return self.get_api().get_metadata("endpointPrefix")

    def get_aws_request_id(self) -> Optional[str]:
        """
        Request ID of the error. Only present if a response was received;
        None in the event of a networking error.
        """
        return self._request_id

    def get_aws_error_type(self) -> Optional[str]:
        """Error type reported by the service ("client" or "server")."""
        return self._error_type

    def get_aws_error_code(self) -> Optional[str]:
        return self._error_code

    # -------- deprecated aliases --------

    def get_request_id(self) -> Optional[str]:
        """Deprecated: use get_aws_request_id()."""
        _deprecated("get_request_id", "get_aws_request_id")
        return self.get_aws_request_id()

    def get_exception_code(self) -> Optional[str]:
        """Deprecated: use get_aws_error_code()."""
        _deprecated("get_exception_code", "get_aws_error_code")
        return self.get_aws_error_code()

    def get_exception_type(self) -> Optional[str]:
        """Deprecated: use get_aws_error_type()."""
        _deprecated("get_exception_type", "get_aws_error_type")
        return self.get_aws_error_type()

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "message": self._message,
            "service": self.get_service_name(),
            "code": self._error_code,
            "type": self._error_type,
            "request_id": self._request_id,
        }


def _deprecated(old: str, new: str) -> None:
    if settings.warn_deprecated_accessors:
        warnings.warn(
            f"ServiceError.{old}() is deprecated, use {new}() instead",
            DeprecationWarning,
            stacklevel=3,
        )
