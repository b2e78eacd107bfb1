import jwt
import pytest

from skillupnow.domain.errors import AuthenticationError
from skillupnow.services.token_service import TokenService

SECRET = "test-secret-" + "x" * 64


@pytest.fixture
def tokens():
    return TokenService(secret=SECRET, algorithm="HS512", ttl_seconds=3600)


def test_claim_shape(tokens):
    token = tokens.issue_token("Rachel", ["ROLE_CUSTOMER", "ROLE_USER"])

    payload = jwt.decode(token, SECRET, algorithms=["HS512"])
    assert set(payload) == {"sub", "roles", "exp"}
    assert payload["sub"] == "Rachel"
    assert payload["roles"] == "ROLE_CUSTOMER,ROLE_USER"


def test_decode_roundtrip(tokens):
    payload = tokens.decode_token(tokens.issue_token("Rachel", ["ROLE_CUSTOMER"]))
    assert payload["sub"] == "Rachel"


def test_expired_token_rejected():
    expired = TokenService(secret=SECRET, algorithm="HS512", ttl_seconds=-10)
    token = expired.issue_token("Rachel", ["ROLE_CUSTOMER"])

    with pytest.raises(AuthenticationError):
        expired.decode_token(token)


def test_token_signed_with_other_key_rejected(tokens):
    other = TokenService(secret="another-secret-" + "y" * 64, algorithm="HS512", ttl_seconds=3600)
    token = other.issue_token("Rachel", ["ROLE_CUSTOMER"])

    with pytest.raises(AuthenticationError):
        tokens.decode_token(token)


def test_garbage_token_rejected(tokens):
    with pytest.raises(AuthenticationError):
        tokens.decode_token("not-a-jwt")


def test_authorization_header(tokens):
    assert TokenService.authorization_header("abc") == "Bearer abc"
