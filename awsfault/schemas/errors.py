from typing import Optional
from pydantic import BaseModel


class ServiceErrorOut(BaseModel):
    message: str
    service: str
    code: Optional[str] = None
    type: Optional[str] = None
    request_id: Optional[str] = None
