"""
providers/octopusdeploy/environments.py - Environment Generator
"""

from __future__ import annotations

from core.inventory import ListStep, ResourceGenerator, field_value, register
from core.inventory.generator import ClientFactory

from . import PROVIDER_NAME

ENVIRONMENT_KIND = "octopusdeploy_environment"


def build_steps() -> list[ListStep]:
    return [
        ListStep(
            ENVIRONMENT_KIND,
            PROVIDER_NAME,
            cursor=lambda client: client.cursor("environments"),
            id_of=field_value("Id"),
            name_of=field_value("Name"),
        ),
    ]


@register(PROVIDER_NAME, "environments")
def environment_generator(client_factory: ClientFactory) -> ResourceGenerator:
    return ResourceGenerator(
        name="environments",
        provider_name=PROVIDER_NAME,
        steps=build_steps(),
        client_factory=client_factory,
    )
