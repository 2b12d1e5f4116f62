"""
providers/aws/waf_regional.py - WAF Regional (Classic) 리소스 Generator

WAF Regional의 List* API는 botocore paginator가 없어 NextMarker/Limit로
직접 페이지를 넘깁니다. 각 항목은 ``<Kind>Id``와 ``Name`` 필드를 가집니다.

aws_wafregional_web_acl_association은 목록 API가 없어 수집하지 않습니다.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from core.config import settings
from core.inventory import ListStep, ResourceGenerator, field_value, marker_cursor, register
from core.inventory.generator import ClientFactory

from . import PROVIDER_NAME

WAF_ALLOW_EMPTY_VALUES = ["tags."]

UNSUPPORTED_KINDS = ("aws_wafregional_web_acl_association",)


class WafListing(NamedTuple):
    """WAF Regional 목록 API 하나의 매핑"""

    kind: str
    operation: str
    result_key: str
    id_key: str


WAF_REGIONAL_LISTINGS: tuple[WafListing, ...] = (
    WafListing("aws_wafregional_web_acl", "list_web_acls", "WebACLs", "WebACLId"),
    WafListing("aws_wafregional_byte_match_set", "list_byte_match_sets", "ByteMatchSets", "ByteMatchSetId"),
    WafListing("aws_wafregional_geo_match_set", "list_geo_match_sets", "GeoMatchSets", "GeoMatchSetId"),
    WafListing("aws_wafregional_ipset", "list_ip_sets", "IPSets", "IPSetId"),
    WafListing("aws_wafregional_rate_based_rule", "list_rate_based_rules", "Rules", "RuleId"),
    WafListing("aws_wafregional_regex_match_set", "list_regex_match_sets", "RegexMatchSets", "RegexMatchSetId"),
    WafListing(
        "aws_wafregional_regex_pattern_set", "list_regex_pattern_sets", "RegexPatternSets", "RegexPatternSetId"
    ),
    WafListing("aws_wafregional_rule", "list_rules", "Rules", "RuleId"),
    WafListing("aws_wafregional_rule_group", "list_rule_groups", "RuleGroups", "RuleGroupId"),
    WafListing(
        "aws_wafregional_size_constraint_set",
        "list_size_constraint_sets",
        "SizeConstraintSets",
        "SizeConstraintSetId",
    ),
    WafListing(
        "aws_wafregional_sql_injection_match_set",
        "list_sql_injection_match_sets",
        "SqlInjectionMatchSets",
        "SqlInjectionMatchSetId",
    ),
    WafListing("aws_wafregional_xss_match_set", "list_xss_match_sets", "XssMatchSets", "XssMatchSetId"),
)


def _listing_step(listing: WafListing, limit: int) -> ListStep:
    def cursor(waf: Any):
        return marker_cursor(getattr(waf, listing.operation), listing.result_key, limit)

    return ListStep(
        listing.kind,
        PROVIDER_NAME,
        cursor=cursor,
        id_of=field_value(listing.id_key),
        name_of=field_value("Name"),
        allow_empty_attributes=WAF_ALLOW_EMPTY_VALUES,
    )


def build_steps(limit: int = settings.WAF_LIST_LIMIT) -> list[ListStep]:
    return [_listing_step(listing, limit) for listing in WAF_REGIONAL_LISTINGS]


@register(PROVIDER_NAME, "wafregional")
def waf_regional_generator(client_factory: ClientFactory) -> ResourceGenerator:
    """WAF Regional Generator 생성"""
    return ResourceGenerator(
        name="wafregional",
        provider_name=PROVIDER_NAME,
        steps=build_steps(),
        client_factory=client_factory,
        unsupported_kinds=UNSUPPORTED_KINDS,
    )
