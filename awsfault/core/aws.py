import logging

import boto3
from .config import settings

logger = logging.getLogger(__name__)


class AwsSessionFactory:
    """
    Lazy session factory. It does NOT create any service clients itself.
    Each client adapter asks for the session when it needs to initialize
    its own botocore client.
    """
    _session = None

    @classmethod
    def get_session(cls) -> boto3.Session:
        if cls._session is None:
            cls._session = boto3.Session(
                region_name=settings.aws_region,
                profile_name=settings.aws_profile,
            )
            logger.debug("Created boto3 session (region=%s)", cls._session.region_name)
        return cls._session
