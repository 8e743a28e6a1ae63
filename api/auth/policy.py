"""
Access policy: which paths need credentials, and which credentials pass.

Evaluated per request, in order:
1) path is public (health, API docs, schema, DB console) -> allow, no check
2) otherwise HTTP Basic credentials must verify -> allow, else unauthorized
"""

from __future__ import annotations

import base64
import binascii
import enum
from collections.abc import Iterable
from dataclasses import dataclass

from .security import CredentialVerifier


class AccessDecision(enum.Enum):
    ALLOW = "allow"
    UNAUTHORIZED = "unauthorized"


def parse_basic_credentials(authorization: str | None) -> tuple[str, str] | None:
    """
    Decode `Basic base64(username:password)`; None when absent or malformed.
    """
    raw = (authorization or "").strip()
    if not raw:
        return None

    parts = raw.split(" ", 1)
    if len(parts) != 2 or parts[0].strip().lower() != "basic":
        return None

    try:
        decoded = base64.b64decode(parts[1].strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def _normalize_prefix(prefix: str) -> str:
    prefix = (prefix or "").strip()
    if not prefix:
        return ""
    return "/" + prefix.strip("/")


@dataclass(frozen=True)
class AccessPolicy:
    verifier: CredentialVerifier
    public_prefixes: tuple[str, ...] = ()
    realm: str = "portfolio-api"

    @classmethod
    def build(
        cls,
        verifier: CredentialVerifier,
        *,
        public_prefixes: Iterable[str],
        realm: str,
    ) -> AccessPolicy:
        prefixes = tuple(p for p in (_normalize_prefix(p) for p in public_prefixes) if p)
        return cls(verifier=verifier, public_prefixes=prefixes, realm=realm)

    def is_public(self, path: str) -> bool:
        # "/health" covers "/health" and "/health/..." but not "/healthz".
        path = path or "/"
        return any(path == prefix or path.startswith(prefix + "/") for prefix in self.public_prefixes)

    def evaluate(self, path: str, authorization: str | None) -> AccessDecision:
        if self.is_public(path):
            return AccessDecision.ALLOW

        credentials = parse_basic_credentials(authorization)
        if credentials is None:
            return AccessDecision.UNAUTHORIZED

        username, password = credentials
        if not self.verifier.verify(username, password):
            return AccessDecision.UNAUTHORIZED
        return AccessDecision.ALLOW

    def challenge(self) -> str:
        return f'Basic realm="{self.realm}"'
