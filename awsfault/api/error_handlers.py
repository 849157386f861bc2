# awsfault/api/error_handlers.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.exceptions import ServiceError
from ..schemas.errors import ServiceErrorOut

logger = logging.getLogger(__name__)


def status_for(err: ServiceError) -> int:
    # upstream client errors keep their 4xx; everything else is a bad gateway
    status = err.get_status_code()
    if err.get_aws_error_type() == "client" and status and 400 <= status < 500:
        return status
    return 502


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.warning(
        "%s %s -> %s (request_id=%s)",
        request.method,
        request.url.path,
        exc.message,
        exc.get_aws_request_id(),
    )
    body = ServiceErrorOut(**exc.to_dict())
    return JSONResponse(status_code=status_for(exc), content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
