from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from docshare.adapter.services.jwt_tokens import JwtSecureLinkIssuer, JwtSessionTokenIssuer
from docshare.domain.entities import IdentityKind

SECRET = "test-secret"


@pytest.fixture
def session_issuer():
    return JwtSessionTokenIssuer(SECRET)


@pytest.fixture
def link_issuer():
    return JwtSecureLinkIssuer(SECRET, "http://docs.example.com/", "/api")


# ============================================================================
# Session tokens
# ============================================================================


def test_session_token_carries_id_and_role(session_issuer):
    identity_id = uuid4()

    claims = session_issuer.verify(session_issuer.issue(identity_id, IdentityKind.institute))

    assert claims.id == identity_id
    assert claims.role == IdentityKind.institute


def test_expired_session_token(session_issuer):
    issuer = JwtSessionTokenIssuer(SECRET, expires_delta=timedelta(seconds=-1))

    assert session_issuer.verify(issuer.issue(uuid4(), IdentityKind.user)) is None


def test_session_token_signed_with_other_secret(session_issuer):
    token = JwtSessionTokenIssuer("other-secret").issue(uuid4(), IdentityKind.user)

    assert session_issuer.verify(token) is None


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
def test_malformed_session_token(session_issuer, token):
    assert session_issuer.verify(token) is None


def test_link_token_is_not_a_session(session_issuer, link_issuer):
    token = link_issuer.issue(uuid4(), uuid4(), 7)

    assert session_issuer.verify(token) is None


# ============================================================================
# Secure links
# ============================================================================


def test_link_within_window_is_valid(link_issuer):
    document_id, user_id = uuid4(), uuid4()
    issued_at = datetime.now(UTC) - timedelta(days=6)

    claims = link_issuer.verify(link_issuer.issue(document_id, user_id, 7, issued_at=issued_at))

    assert claims.document_id == document_id
    assert claims.user_id == user_id
    assert abs(claims.expires_at - (issued_at + timedelta(days=7))) < timedelta(seconds=1)


def test_link_past_window_is_rejected(link_issuer):
    issued_at = datetime.now(UTC) - timedelta(days=8)

    token = link_issuer.issue(uuid4(), uuid4(), 7, issued_at=issued_at)

    assert link_issuer.verify(token) is None


def test_link_tampered_payload_is_rejected(link_issuer):
    token = link_issuer.issue(uuid4(), uuid4(), 7)
    header, payload, signature = token.split(".")
    forged = link_issuer.issue(uuid4(), uuid4(), 365).split(".")[1]

    assert link_issuer.verify(".".join([header, forged, signature])) is None


def test_session_token_is_not_a_link(session_issuer, link_issuer):
    token = session_issuer.issue(uuid4(), IdentityKind.user)

    assert link_issuer.verify(token) is None


@pytest.mark.parametrize("days", [0, -1])
def test_link_requires_positive_expiry(link_issuer, days):
    with pytest.raises(ValueError):
        link_issuer.issue(uuid4(), uuid4(), days)


def test_build_url(link_issuer):
    assert link_issuer.build_url("abc") == "http://docs.example.com/api/documents/shared/abc"
