"""
AWS Systems Manager Parameter Store helper.
Holds the session signing secret per environment.
"""
import logging
import boto3
from functools import lru_cache

logger = logging.getLogger(__name__)

PARAMETER_PREFIX = "/session-auth-api"


def signing_secret_parameter_name(environment: str) -> str:
    """Default Parameter Store name of the signing secret for an environment."""
    return f"{PARAMETER_PREFIX}/{environment}/jwt-secret"


@lru_cache(maxsize=10)
def get_parameter(parameter_name: str, region: str = "us-east-1") -> str:
    """
    Fetch a SecureString parameter, cached per name and region.

    Failed lookups are not cached, so a parameter created after startup
    is picked up on the next call.

    Args:
        parameter_name: Full parameter name (e.g., /session-auth-api/production/jwt-secret)
        region: AWS region

    Returns:
        Decrypted parameter value
    """
    logger.info("Reading %s from Parameter Store", parameter_name)
    ssm = boto3.client('ssm', region_name=region)
    response = ssm.get_parameter(Name=parameter_name, WithDecryption=True)
    return response['Parameter']['Value']
