"""
Tests for the Lambda entry point.
"""
from mangum import Mangum
from src.lambda_handler import create_handler
from conftest import make_settings


def test_create_handler_wraps_app():
    handler = create_handler(make_settings())

    assert isinstance(handler, Mangum)
    assert handler.app.state.settings.node_env == "test"
