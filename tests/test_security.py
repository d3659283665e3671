from datetime import timedelta

from shared.security.dependencies import (
    Anonymous,
    AuthenticatedAdmin,
    AuthenticatedUser,
    context_from_claims,
)
from shared.security.jwt_handler import create_access_token, verify_access_token
from shared.security.rate_limiter import user_id_or_ip


class TestContextFromClaims:
    def test_regular_user(self):
        context = context_from_claims(
            {"sub": "3", "name": "Alice", "email": "alice@example.com", "is_admin": False}
        )

        assert type(context) is AuthenticatedUser
        assert context.user_id == 3
        assert context.is_authenticated is True
        assert context.is_admin is False

    def test_admin_is_also_a_user(self):
        context = context_from_claims({"sub": "1", "name": "Root", "is_admin": True})

        assert isinstance(context, AuthenticatedAdmin)
        assert isinstance(context, AuthenticatedUser)
        assert context.is_admin is True

    def test_missing_or_malformed_subject_is_anonymous(self):
        assert isinstance(context_from_claims({"name": "x"}), Anonymous)
        assert isinstance(context_from_claims({"sub": "abc"}), Anonymous)


class TestTokens:
    def test_round_trip_keeps_claims(self):
        token = create_access_token({"sub": "5", "is_admin": True})

        payload = verify_access_token(token)

        assert payload["sub"] == "5"
        assert payload["is_admin"] is True

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "5"}, expires_delta=timedelta(seconds=-1))

        assert verify_access_token(token) is None

    def test_garbage_is_rejected(self):
        assert verify_access_token("not.a.token") is None


class _FakeRequest:
    def __init__(self, headers):
        self.headers = headers
        self.client = type("Client", (), {"host": "10.0.0.9"})()


def test_rate_limit_key_prefers_user_id():
    token = create_access_token({"sub": "42"})

    assert user_id_or_ip(_FakeRequest({"Authorization": f"Bearer {token}"})) == "user:42"
    assert user_id_or_ip(_FakeRequest({})) == "ip:10.0.0.9"
