"""
tests/providers/aws/test_aws_waf_regional.py - WAF Regional Generator 테스트
"""

from unittest.mock import MagicMock

from core.inventory import default_registry
from core.inventory.result import Err
from providers.aws.waf_regional import (
    UNSUPPORTED_KINDS,
    WAF_REGIONAL_LISTINGS,
    build_steps,
    waf_regional_generator,
)


def fake_waf_client(responses: dict | None = None) -> MagicMock:
    """operation별 응답 목록을 순서대로 반환하는 WAF Regional 클라이언트 (기본: 빈 목록)"""
    client = MagicMock()
    responses = responses or {}
    for listing in WAF_REGIONAL_LISTINGS:
        method = getattr(client, listing.operation)
        if listing.operation in responses:
            method.side_effect = responses[listing.operation]
        else:
            method.return_value = {listing.result_key: []}
    return client


class TestWafRegionalListings:
    """목록 정의 테스트"""

    def test_twelve_kinds(self):
        kinds = [listing.kind for listing in WAF_REGIONAL_LISTINGS]
        assert len(kinds) == 12
        assert len(set(kinds)) == 12
        assert "aws_wafregional_web_acl_association" not in kinds
        assert UNSUPPORTED_KINDS == ("aws_wafregional_web_acl_association",)

    def test_build_steps_kinds(self):
        steps = build_steps()
        assert [s.kind for s in steps] == [listing.kind for listing in WAF_REGIONAL_LISTINGS]

    def test_registered(self):
        assert ("aws", "wafregional") in default_registry


class TestWafRegionalGenerator:
    """WAF Regional Generator 테스트"""

    def test_marker_pagination(self):
        """NextMarker로 페이지를 넘기며 Id/Name 매핑"""
        client = fake_waf_client(
            {
                "list_web_acls": [
                    {"WebACLs": [{"WebACLId": "acl-1", "Name": "main"}], "NextMarker": "m1"},
                    {"WebACLs": [{"WebACLId": "acl-2", "Name": "backup"}]},
                ],
            }
        )

        descriptors = waf_regional_generator(lambda: client).discover().unwrap()

        assert [(d.id, d.name) for d in descriptors] == [("acl-1", "main"), ("acl-2", "backup")]
        assert all(d.kind == "aws_wafregional_web_acl" for d in descriptors)
        assert client.list_web_acls.call_args_list[1].kwargs == {"Limit": 100, "NextMarker": "m1"}

    def test_every_listing_called_in_order(self):
        client = fake_waf_client()
        calls = []

        def recorder(listing):
            def call(**kwargs):
                calls.append(listing.operation)
                return {listing.result_key: []}

            return call

        for listing in WAF_REGIONAL_LISTINGS:
            getattr(client, listing.operation).side_effect = recorder(listing)

        waf_regional_generator(lambda: client).discover()

        assert calls == [listing.operation for listing in WAF_REGIONAL_LISTINGS]

    def test_rules_and_rate_based_rules(self):
        """Rules 결과 키를 공유하는 두 kind 구분"""
        client = fake_waf_client(
            {
                "list_rules": [{"Rules": [{"RuleId": "r-1", "Name": "block"}]}],
                "list_rate_based_rules": [{"Rules": [{"RuleId": "rb-1", "Name": "limit"}]}],
            }
        )

        descriptors = waf_regional_generator(lambda: client).discover().unwrap()

        assert [(d.kind, d.id) for d in descriptors] == [
            ("aws_wafregional_rate_based_rule", "rb-1"),
            ("aws_wafregional_rule", "r-1"),
        ]

    def test_failure_stops_remaining(self, make_client_error):
        """중간 목록 실패 시 이후 목록은 호출하지 않음"""
        error = make_client_error("WAFInternalErrorException", "ListIPSets")
        client = fake_waf_client({"list_ip_sets": error})

        result = waf_regional_generator(lambda: client).discover()

        assert result == Err(error)
        client.list_rules.assert_not_called()
        client.list_xss_match_sets.assert_not_called()
