from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional


class ApiModel:
    """
    Minimal view of a service description: the endpoint identity plus the
    raw metadata mapping. Built from botocore's ServiceModel in production,
    or from a plain dict in tests.
    """

    def __init__(self, metadata: Mapping[str, Any], *, service_name: Optional[str] = None):
        self._metadata: Dict[str, Any] = dict(metadata)
        self.service_name = service_name or self._metadata.get("serviceId")

    @classmethod
    def from_service_model(cls, service_model) -> "ApiModel":
        return cls(service_model.metadata, service_name=service_model.service_name)

    def get_endpoint_prefix(self) -> str:
        return self._metadata["endpointPrefix"]

    def get_metadata(self, key: Optional[str] = None):
        if key is None:
            return dict(self._metadata)
        return self._metadata.get(key)

    def __repr__(self) -> str:
        return f"ApiModel(endpointPrefix={self._metadata.get('endpointPrefix')!r})"


class AwsClientInterface(ABC):
    """Anything that can report the API model of the service it calls."""

    @abstractmethod
    def get_api(self) -> ApiModel:
        ...
