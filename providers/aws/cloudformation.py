"""
providers/aws/cloudformation.py - CloudFormation 리소스 Generator

수집 대상 (순서대로):
    1. aws_cloudformation_stack          - list_stacks (DELETE_COMPLETE 제외)
    2. aws_cloudformation_stack_set      - list_stack_sets
    3. aws_cloudformation_stack_set_instance
       - StackSet마다 list_stack_instances
       - ID: "StackSetId,Account,Region" 복합 ID
"""

from __future__ import annotations

from typing import Any

from core.inventory import (
    BotoPaginatorCursor,
    ChildListStep,
    ListStep,
    ResourceGenerator,
    composite_id,
    field_value,
    register,
)
from core.inventory.generator import ClientFactory

from . import PROVIDER_NAME

CLOUDFORMATION_ALLOW_EMPTY_VALUES = ["tags."]

STACK_KIND = "aws_cloudformation_stack"
STACK_SET_KIND = "aws_cloudformation_stack_set"
STACK_SET_INSTANCE_KIND = "aws_cloudformation_stack_set_instance"


def is_deleted_stack(summary: dict[str, Any]) -> bool:
    """삭제 완료된 Stack인지 (인벤토리에서 제외)"""
    return summary.get("StackStatus") == "DELETE_COMPLETE"


def stack_set_instance_id(summary: dict[str, Any]) -> str:
    return composite_id(summary.get("StackSetId"), summary.get("Account"), summary.get("Region"))


def _stack_instances_cursor(cfn: Any, stack_set: dict[str, Any]) -> BotoPaginatorCursor:
    return BotoPaginatorCursor(
        cfn,
        "list_stack_instances",
        "Summaries",
        StackSetName=stack_set["StackSetName"],
    )


def build_steps() -> list[ListStep | ChildListStep]:
    return [
        ListStep(
            STACK_KIND,
            PROVIDER_NAME,
            cursor=lambda cfn: BotoPaginatorCursor(cfn, "list_stacks", "StackSummaries"),
            id_of=field_value("StackName"),
            skip=is_deleted_stack,
            allow_empty_attributes=CLOUDFORMATION_ALLOW_EMPTY_VALUES,
        ),
        ListStep(
            STACK_SET_KIND,
            PROVIDER_NAME,
            cursor=lambda cfn: BotoPaginatorCursor(cfn, "list_stack_sets", "Summaries"),
            id_of=field_value("StackSetName"),
            allow_empty_attributes=CLOUDFORMATION_ALLOW_EMPTY_VALUES,
        ),
        ChildListStep(
            STACK_SET_INSTANCE_KIND,
            PROVIDER_NAME,
            parent_kind=STACK_SET_KIND,
            cursor=_stack_instances_cursor,
            id_of=stack_set_instance_id,
            allow_empty_attributes=CLOUDFORMATION_ALLOW_EMPTY_VALUES,
        ),
    ]


@register(PROVIDER_NAME, "cloudformation")
def cloudformation_generator(client_factory: ClientFactory) -> ResourceGenerator:
    """CloudFormation Generator 생성"""
    return ResourceGenerator(
        name="cloudformation",
        provider_name=PROVIDER_NAME,
        steps=build_steps(),
        client_factory=client_factory,
    )
