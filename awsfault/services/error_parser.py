from typing import Any, Dict, Mapping, Optional

from ..schemas.transaction import AwsErrorDetails

_TYPE_ALIASES = {
    "sender": "client",
    "client": "client",
    "receiver": "server",
    "server": "server",
}

_REQUEST_ID_HEADERS = ("x-amz-request-id", "x-amzn-requestid")


def _error_type(error: Mapping[str, Any], status: Optional[int]) -> Optional[str]:
    reported = str(error.get("Type") or "").strip().lower()
    if reported in _TYPE_ALIASES:
        return _TYPE_ALIASES[reported]
    if status is None:
        return None
    return "server" if status >= 500 else "client"


def _request_id(meta: Mapping[str, Any]) -> Optional[str]:
    if meta.get("RequestId"):
        return meta["RequestId"]
    headers = {str(k).lower(): v for k, v in (meta.get("HTTPHeaders") or {}).items()}
    for name in _REQUEST_ID_HEADERS:
        if headers.get(name):
            return headers[name]
    return None


def parse_aws_error(response: Optional[Dict[str, Any]]) -> Optional[AwsErrorDetails]:
    """
    Build AwsErrorDetails from a botocore parsed error response
    (the ``response`` attribute of a ClientError).
    Returns None when there is no response at all.
    """
    if not response:
        return None

    error = response.get("Error") or {}
    meta = response.get("ResponseMetadata") or {}
    status = meta.get("HTTPStatusCode")

    return AwsErrorDetails(
        message=error.get("Message"),
        code=error.get("Code"),
        type=_error_type(error, status),
        request_id=_request_id(meta),
    )
