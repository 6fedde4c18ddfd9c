"""
Unit tests for unverified claim decoding.
"""

from feed_auth.auth_token.claims import decode_claims
from tests.fixtures.token_fixtures import make_jwt


def test_decode_claims_reads_payload():
    token = make_jwt({"nbf": 100, "exp": 200, "scp": "vso.packaging"})
    assert decode_claims(token) == {"nbf": 100, "exp": 200, "scp": "vso.packaging"}


def test_decode_claims_ignores_expired_token():
    # Expiry is not verified; the claims are informational only
    token = make_jwt({"nbf": 1, "exp": 2})
    assert decode_claims(token)["exp"] == 2


def test_decode_claims_opaque_token_returns_none():
    assert decode_claims("opaque-access-token") is None


def test_decode_claims_garbage_segments_return_none():
    assert decode_claims("a.b.c") is None
