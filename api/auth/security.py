"""
Auth security helpers.

Passwords are only ever held as bcrypt hashes. The configured principal's
plain password (if it comes in that way) is hashed once at startup.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Protocol

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 12


class AuthSecurityError(RuntimeError):
    pass


def hash_password(plain_password: str, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    try:
        return bcrypt.hashpw(password, bcrypt.gensalt(rounds=rounds)).decode("utf-8")
    except ValueError as exc:
        # bcrypt rejects passwords over 72 bytes and out-of-range costs.
        raise AuthSecurityError(f"Cannot hash password: {exc}") from exc


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


class CredentialVerifier(Protocol):
    def verify(self, username: str, password: str) -> bool: ...


@dataclass(frozen=True)
class Principal:
    username: str
    roles: tuple[str, ...] = ("USER",)


@dataclass(frozen=True)
class BcryptCredentialVerifier:
    """
    Accepts exactly one username, with a password matching a bcrypt hash.
    """

    principal: Principal
    password_hash: str

    def verify(self, username: str, password: str) -> bool:
        # Always run the hash check so a wrong username costs the same time.
        username_ok = hmac.compare_digest(
            (username or "").encode("utf-8"),
            self.principal.username.encode("utf-8"),
        )
        password_ok = verify_password(password, self.password_hash)
        return username_ok and password_ok
