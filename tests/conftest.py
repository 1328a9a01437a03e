"""
Shared test fixtures and utilities.
"""
from typing import Optional
import bcrypt
import pytest
from fastapi.testclient import TestClient
from src.core.config import Settings
from src.main import create_app
from src.repositories.user_repository import UserRepository

ADMIN_PASSWORD = "Securepassword1"
USER_PASSWORD = "password123"
TEST_SECRET = "test-signing-secret-for-session-tokens"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=4)).decode('utf-8')


class InMemoryUserRepository(UserRepository):
    """User store kept in a dict, for route and service tests."""

    def __init__(self, users: Optional[dict] = None, reachable: bool = True):
        self.users = users or {}
        self.reachable = reachable
        self.logins = []

    def get_by_username(self, username: str) -> Optional[dict]:
        return self.users.get(username)

    def record_login(self, username: str) -> None:
        self.logins.append(username)

    def ping(self) -> bool:
        return self.reachable


def make_settings(**overrides) -> Settings:
    values = {
        "aws_region": "us-east-1",
        "users_table_name": "",
        "database_url": None,
        "jwt_secret": TEST_SECRET,
        "jwt_secret_parameter": None,
        "node_env": "test",
        "admin_username": "admin",
        "admin_password_hash": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(scope="session")
def admin_password_hash():
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture(scope="session")
def user_password_hash():
    return hash_password(USER_PASSWORD)


@pytest.fixture
def settings(admin_password_hash):
    return make_settings(admin_password_hash=admin_password_hash)


@pytest.fixture
def user_repository(user_password_hash):
    return InMemoryUserRepository({
        "alice": {
            "username": "alice",
            "id": "user-1",
            "password_hash": user_password_hash,
            "role": "USER",
            "name": "Alice Smith",
            "email": "alice@example.com",
            "department": "Engineering",
            "position": "Planner",
            "is_active": True
        },
        "bob": {
            "username": "bob",
            "id": "user-2",
            "password_hash": user_password_hash,
            "role": "USER",
            "is_active": False
        }
    })


@pytest.fixture
def client(settings, user_repository):
    app = create_app(settings, user_repository=user_repository)
    return TestClient(app)
