"""
Unit tests for password hashing and token issuing/verification.
"""

import base64
import json

import pytest
from jose import jwt

from inventory_tracker.core.errors import AuthenticationError
from inventory_tracker.core.security import PasswordHasher, Principal, TokenService


def _b64(data: dict) -> str:
    raw = json.dumps(data, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


class TestPasswordHasher:
    def test_hash_is_not_plaintext_and_verifies(self, hasher):
        hashed = hasher.hash("hunter22")
        assert hashed != "hunter22"
        assert hashed.startswith("$2b$10$")
        assert hasher.verify("hunter22", hashed)
        assert not hasher.verify("hunter23", hashed)

    def test_same_password_gets_distinct_salts(self, hasher):
        assert hasher.hash("same-password") != hasher.hash("same-password")

    def test_unreadable_hash_does_not_verify(self, hasher):
        assert hasher.verify("anything", "not-a-bcrypt-hash") is False

    def test_rejects_low_cost_factor(self):
        with pytest.raises(ValueError):
            PasswordHasher(rounds=4)


class TestTokenService:
    def test_round_trip(self, tokens):
        token = tokens.issue(user_id=7, organization_id=42)
        assert tokens.verify(token) == Principal(user_id=7, organization_id=42)

    def test_payload_carries_ids_and_expiry(self, tokens):
        claims = jwt.get_unverified_claims(tokens.issue(1, 2))
        assert claims["userId"] == 1
        assert claims["organizationId"] == 2
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_expired_token_is_rejected(self):
        expired = TokenService(secret_key="another-secret-0123456789", expire_minutes=-1)
        token = expired.issue(1, 1)
        with pytest.raises(AuthenticationError, match="expired"):
            expired.verify(token)

    def test_token_signed_with_other_secret_is_rejected(self, tokens):
        foreign = TokenService(secret_key="someone-elses-secret-0123")
        with pytest.raises(AuthenticationError):
            tokens.verify(foreign.issue(1, 1))

    def test_tampered_payload_is_rejected(self, tokens):
        header, payload, signature = tokens.issue(1, 1).split(".")
        claims = jwt.get_unverified_claims(".".join([header, payload, signature]))
        claims["organizationId"] = 2
        forged = ".".join([header, _b64(claims), signature])
        with pytest.raises(AuthenticationError):
            tokens.verify(forged)

    def test_garbage_and_empty_tokens_are_rejected(self, tokens):
        for token in ("", "not.a.jwt", "abc"):
            with pytest.raises(AuthenticationError):
                tokens.verify(token)

    def test_token_without_binding_claims_is_rejected(self, tokens):
        token = jwt.encode({"sub": "1"}, "test-signing-secret-0123456789", algorithm="HS256")
        with pytest.raises(AuthenticationError):
            tokens.verify(token)

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            TokenService(secret_key="")

    def test_repr_does_not_expose_secret(self, tokens):
        assert "test-signing-secret" not in repr(tokens)
