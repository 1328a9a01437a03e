"""
Identity domain model.
Represents an authenticated principal produced by a credential validator.
"""
from typing import Optional

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"

LOGIN_TYPE_ADMIN = "admin"
LOGIN_TYPE_USER = "user"


class Identity:
    """Domain model for an authenticated user."""

    def __init__(
        self,
        id: str,
        username: str,
        role: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        department: Optional[str] = None,
        position: Optional[str] = None,
        login_type: str = LOGIN_TYPE_USER
    ):
        self.id = id
        self.username = username
        self.role = role
        self.name = name
        self.email = email
        self.department = department
        self.position = position
        self.login_type = login_type

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def to_claims(self) -> dict:
        """Claims embedded into the session token."""
        claims = {
            "sub": self.id,
            "username": self.username,
            "role": self.role,
            "login_type": self.login_type
        }
        if self.name:
            claims["name"] = self.name
        if self.email:
            claims["email"] = self.email
        return claims

    @classmethod
    def from_claims(cls, claims: dict) -> "Identity":
        return cls(
            id=claims["sub"],
            username=claims["username"],
            role=claims["role"],
            name=claims.get("name"),
            email=claims.get("email"),
            login_type=claims.get("login_type", LOGIN_TYPE_USER)
        )

    def __repr__(self):
        return f"Identity(id={self.id}, username={self.username}, role={self.role}, login_type={self.login_type})"
