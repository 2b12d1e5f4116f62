"""
providers/octopusdeploy/tag_set.py - Tag Set Generator
"""

from __future__ import annotations

from core.inventory import ListStep, ResourceGenerator, field_value, register
from core.inventory.generator import ClientFactory

from . import PROVIDER_NAME

TAG_SET_KIND = "octopusdeploy_tag_set"


def build_steps() -> list[ListStep]:
    return [
        ListStep(
            TAG_SET_KIND,
            PROVIDER_NAME,
            cursor=lambda client: client.cursor("tagsets"),
            id_of=field_value("Id"),
            name_of=field_value("Name"),
        ),
    ]


@register(PROVIDER_NAME, "tag_sets")
def tag_set_generator(client_factory: ClientFactory) -> ResourceGenerator:
    return ResourceGenerator(
        name="tag_sets",
        provider_name=PROVIDER_NAME,
        steps=build_steps(),
        client_factory=client_factory,
    )
