# awsfault/services/botocore_client.py
import logging
from typing import Any, Dict, Optional

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from ..core.aws import AwsSessionFactory
from ..core.exceptions import CommandError
from ..schemas.transaction import CommandTransaction, ErrorContext
from .api_model import ApiModel, AwsClientInterface
from .error_parser import parse_aws_error
from .error_translator import ServiceErrorTranslator

logger = logging.getLogger(__name__)


class BotocoreClient(AwsClientInterface):
    """
    Adapter that makes a botocore client a recognized service client.
    The underlying client is created lazily from the shared session unless
    one is injected.
    """

    def __init__(self, service_name: str, *, client: Optional[BaseClient] = None, **client_kwargs):
        self.service_name = service_name
        self._client = client
        self._client_kwargs = client_kwargs

    @property
    def client(self) -> BaseClient:
        if self._client is None:
            session = AwsSessionFactory.get_session()
            self._client = session.client(self.service_name, **self._client_kwargs)
        return self._client

    def get_api(self) -> ApiModel:
        return ApiModel.from_service_model(self.client.meta.service_model)

    def execute(self, operation: str, **params) -> Dict[str, Any]:
        """
        Call ``operation`` (python method name, e.g. "list_buckets").
        Failures are raised as ServiceError chained to the CommandError.
        """
        method = getattr(self.client, operation)
        try:
            return method(**params)
        except ClientError as err:
            failure = self._command_error(
                str(err),
                operation=err.operation_name,
                params=params,
                response=err.response,
                previous=err,
            )
        except BotoCoreError as err:
            failure = self._command_error(
                str(err),
                operation=operation,
                params=params,
                response=None,
                previous=err,
            )
        logger.info("%s.%s failed: %s", self.service_name, operation, failure.message)
        raise ServiceErrorTranslator.wrap(failure) from failure

    def _command_error(
        self,
        message: str,
        *,
        operation: str,
        params: Dict[str, Any],
        response: Optional[Dict[str, Any]],
        previous: Exception,
    ) -> CommandError:
        transaction = CommandTransaction(
            operation=operation,
            request=dict(params),
            response=response,
            context=ErrorContext(aws_error=parse_aws_error(response)),
        )
        failure = CommandError(message, transaction, client=self, previous=previous)
        failure.__cause__ = previous
        return failure
