"""
providers/octopusdeploy - Octopus Deploy 리소스 Generator

서비스:
    - environments: octopusdeploy_environment
    - tag_sets: octopusdeploy_tag_set

클라이언트는 requests 기반 OctopusDeployClient를 사용합니다.
"""

PROVIDER_NAME = "octopusdeploy"

from .client import OctopusDeployClient, create_client_factory  # noqa: E402
from . import environments, tag_set  # noqa: E402

__all__ = [
    "PROVIDER_NAME",
    "OctopusDeployClient",
    "create_client_factory",
    "environments",
    "tag_set",
]
