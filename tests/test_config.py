"""
Tests for settings and signing secret resolution.
"""
import pytest
from moto import mock_aws
import boto3
from src.core import parameter_store
from src.core.config import DEV_FALLBACK_SECRET, Settings
from src.core.parameter_store import signing_secret_parameter_name
from src.core.exceptions import InternalException
from conftest import make_settings


@pytest.fixture(autouse=True)
def clear_parameter_cache(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    parameter_store.get_parameter.cache_clear()
    yield
    parameter_store.get_parameter.cache_clear()


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "production")
        monkeypatch.setenv("SESSION_MAX_AGE_SECONDS", "3600")
        monkeypatch.setenv("DATABASE_URL", "http://localhost:8000")

        settings = Settings(_env_file=None)

        assert settings.is_production
        assert settings.session_max_age_seconds == 3600
        assert settings.database_url == "http://localhost:8000"
        assert settings.session_cookie_name == "auth-session"

    def test_reads_region_from_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "eu-west-1")

        assert Settings(_env_file=None).aws_region == "eu-west-1"

    def test_admin_profile_defaults(self):
        settings = make_settings()

        assert settings.admin_name == "System Administrator"
        assert settings.admin_department == "System"
        assert settings.admin_position == "Administrator"

    def test_signing_secret_from_env_value(self):
        assert make_settings(jwt_secret="abc").signing_secret == "abc"

    @mock_aws
    def test_signing_secret_from_parameter_store(self):
        ssm = boto3.client("ssm", region_name="us-east-1")
        ssm.put_parameter(Name="/session-auth-api/test/jwt-secret", Value="from-ssm", Type="SecureString")

        settings = make_settings(jwt_secret=None, jwt_secret_parameter="/session-auth-api/test/jwt-secret")

        assert settings.signing_secret == "from-ssm"

    @mock_aws
    def test_missing_parameter_falls_back_outside_production(self):
        settings = make_settings(jwt_secret=None, jwt_secret_parameter="/missing")

        assert settings.signing_secret == DEV_FALLBACK_SECRET

    def test_fallback_outside_production(self):
        assert make_settings(jwt_secret=None).signing_secret == DEV_FALLBACK_SECRET

    @mock_aws
    def test_no_secret_in_production(self):
        settings = make_settings(jwt_secret=None, node_env="production")

        with pytest.raises(InternalException):
            settings.signing_secret

    @mock_aws
    def test_production_reads_default_parameter(self):
        ssm = boto3.client("ssm", region_name="us-east-1")
        ssm.put_parameter(Name="/session-auth-api/production/jwt-secret", Value="production-secret", Type="SecureString")

        settings = make_settings(jwt_secret=None, node_env="production")

        assert settings.signing_secret == "production-secret"

    def test_fallback_secret_is_long_enough_for_hs256(self):
        assert len(DEV_FALLBACK_SECRET.encode()) >= 32


class TestParameterNames:
    def test_signing_secret_parameter_name(self):
        assert signing_secret_parameter_name("staging") == "/session-auth-api/staging/jwt-secret"
