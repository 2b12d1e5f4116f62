"""
tests/providers/aws/test_aws_client.py - boto3 client 헬퍼 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.config import Config
from botocore.exceptions import ProfileNotFound

from core.exceptions import ConfigurationError
from providers.aws import BOTO3_SERVICE_NAMES, create_client_factory
from providers.aws.client import create_client_factory as create_boto3_client_factory
from providers.aws.client import get_client


class TestGetClient:
    """get_client 테스트"""

    def test_retry_config(self):
        session = MagicMock()

        get_client(session, "cloudformation", region_name="us-east-1")

        _, kwargs = session.client.call_args
        config = kwargs["config"]
        assert kwargs["region_name"] == "us-east-1"
        assert config.retries == {"max_attempts": 5, "mode": "adaptive"}
        assert config.connect_timeout == 10
        assert config.read_timeout == 30

    def test_merge_config(self):
        session = MagicMock()

        get_client(session, "waf-regional", config=Config(read_timeout=60))

        config = session.client.call_args.kwargs["config"]
        assert config.read_timeout == 60
        assert config.retries["mode"] == "adaptive"


class TestCreateClientFactory:
    """client 팩토리 테스트"""

    def test_lazy_session(self):
        """팩토리 생성 시점에는 세션을 만들지 않음"""
        with patch("providers.aws.client.boto3.Session") as session_cls:
            factory = create_boto3_client_factory("cloudformation", profile="dev", region="us-west-2")
            session_cls.assert_not_called()

            factory()

        session_cls.assert_called_once_with(profile_name="dev")
        session_cls.return_value.client.assert_called_once()
        assert session_cls.return_value.client.call_args.kwargs["region_name"] == "us-west-2"

    def test_default_region(self):
        session = MagicMock()
        with patch.dict("os.environ", {"AWS_REGION": "eu-central-1"}):
            factory = create_boto3_client_factory("cloudformation", session=session)
        factory()

        assert session.client.call_args.kwargs["region_name"] == "eu-central-1"

    def test_profile_not_found(self):
        with patch("providers.aws.client.boto3.Session", side_effect=ProfileNotFound(profile="missing")):
            factory = create_boto3_client_factory("cloudformation", profile="missing", region="us-east-1")

            with pytest.raises(ConfigurationError) as exc_info:
                factory()

        assert exc_info.value.target == "aws/cloudformation"
        assert isinstance(exc_info.value.cause, ProfileNotFound)

    def test_service_name_mapping(self):
        """registry service 이름을 boto3 서비스 이름으로 변환"""
        with patch("providers.aws._create_boto3_client_factory") as inner:
            create_client_factory("wafregional", profile="p", region="r")

        inner.assert_called_once_with("waf-regional", profile="p", region="r")
        assert BOTO3_SERVICE_NAMES["cloudformation"] == "cloudformation"
