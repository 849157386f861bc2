# awsfault/services/error_translator.py
import logging

from ..core.exceptions import CommandError, InvalidOriginError, ServiceError
from .api_model import ApiModel, AwsClientInterface

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = "{service} Error: {detail}"


class ServiceErrorTranslator:
    """
    Turns a generic CommandError into a ServiceError. Stateless: every call
    only reads its own input and returns a new error.
    """

    @staticmethod
    def wrap(failure: CommandError) -> ServiceError:
        client = getattr(failure, "client", None)
        if not isinstance(client, AwsClientInterface):
            raise InvalidOriginError(
                "The wrapped exception must use an AwsClientInterface "
                f"(got {type(client).__name__})"
            )

        api = client.get_api()
        prefix = api.get_metadata("endpointPrefix") if isinstance(api, ApiModel) else None
        if not isinstance(prefix, str) or not prefix.strip():
            raise InvalidOriginError(
                f"{type(client).__name__} does not report an API model with an endpointPrefix"
            )

        context = failure.get_context()

        detail = context.get_path("aws_error/message") or failure.message
        message = MESSAGE_TEMPLATE.format(service=prefix, detail=detail)

        wrapped = ServiceError(
            message,
            cause=failure,
            request_id=context.get_path("aws_error/request_id"),
            error_type=context.get_path("aws_error/type"),
            error_code=context.get_path("aws_error/code"),
        )
        logger.debug(
            "Wrapped %s failure (code=%s, request_id=%s)",
            prefix,
            wrapped.get_aws_error_code(),
            wrapped.get_aws_request_id(),
        )
        return wrapped


wrap = ServiceErrorTranslator.wrap
