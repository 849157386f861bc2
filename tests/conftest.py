from typing import Any, Dict, Optional

import pytest

from awsfault.core.exceptions import CommandError
from awsfault.schemas.transaction import AwsErrorDetails, CommandTransaction, ErrorContext
from awsfault.services.api_model import ApiModel, AwsClientInterface


class FakeAwsClient(AwsClientInterface):
    """Recognized client whose API metadata can be swapped at will."""

    def __init__(self, endpoint_prefix: str = "s3"):
        self.api = ApiModel({"endpointPrefix": endpoint_prefix, "serviceId": endpoint_prefix.upper()})

    def get_api(self) -> ApiModel:
        return self.api


def build_failure(
    *,
    client: Any,
    message: str = "Error executing command",
    aws_error: Optional[Dict[str, Any]] = None,
    response: Optional[Dict[str, Any]] = None,
) -> CommandError:
    details = AwsErrorDetails(**aws_error) if aws_error is not None else None
    transaction = CommandTransaction(
        operation="TestOperation",
        request={"Bucket": "example"},
        response=response,
        context=ErrorContext(aws_error=details),
    )
    return CommandError(message, transaction, client=client, previous=RuntimeError(message))


@pytest.fixture
def s3_client() -> FakeAwsClient:
    return FakeAwsClient("s3")


@pytest.fixture
def dynamodb_client() -> FakeAwsClient:
    return FakeAwsClient("dynamodb")


@pytest.fixture
def access_denied(s3_client: FakeAwsClient) -> CommandError:
    return build_failure(
        client=s3_client,
        message="Client error: 403 Forbidden",
        aws_error={
            "message": "Access Denied",
            "code": "AccessDenied",
            "type": "client",
            "request_id": "abc-123",
        },
        response={"ResponseMetadata": {"HTTPStatusCode": 403, "RequestId": "abc-123"}},
    )
