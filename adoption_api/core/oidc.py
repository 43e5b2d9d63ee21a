"""
Identity-provider (OpenID Connect) helpers.

Used endpoints:
- GET {issuer}/.well-known/openid-configuration -> {"jwks_uri": "...", ...}
- GET {jwks_uri}                                -> {"keys": [{"kid": "...", ...}]}

Two verification modes:
- `OIDC_JWT_SECRET` set: HS256 with a shared secret (local dev, tests)
- otherwise: asymmetric signature checked against the issuer's JWKS
"""

from __future__ import annotations

from typing import Any

import httpx
import jwt

from . import config

ASYMMETRIC_ALGORITHMS = ["RS256", "ES256"]


# Identity-provider failures are explicit and separable from other runtime errors.
class OidcError(RuntimeError):
    pass


def issuer() -> str:
    return config.env_str("OIDC_ISSUER").rstrip("/")


def audience() -> str:
    return config.env_str("OIDC_AUDIENCE")


def shared_secret() -> str:
    return config.env_str("OIDC_JWT_SECRET")


async def _get_json(client: httpx.AsyncClient, url: str) -> dict[str, Any]:
    resp = await client.get(url)
    if resp.status_code != 200:
        body = resp.text[:500]
        raise OidcError(f"Identity provider request failed: {resp.status_code} {body}")
    data = resp.json()
    if not isinstance(data, dict):
        raise OidcError("Identity provider returned a non-object JSON document.")
    return data


async def fetch_jwks(*, issuer_url: str, timeout_s: float = 10.0) -> dict[str, Any]:
    """
    Resolve the issuer's signing keys through its discovery document.
    """
    issuer_url = (issuer_url or "").strip().rstrip("/")
    if not issuer_url:
        raise OidcError("OIDC_ISSUER is empty.")

    async with httpx.AsyncClient(timeout=timeout_s) as client:
        discovery = await _get_json(client, f"{issuer_url}/.well-known/openid-configuration")
        jwks_uri = discovery.get("jwks_uri")
        if not isinstance(jwks_uri, str) or not jwks_uri:
            raise OidcError("Discovery document has no jwks_uri.")
        jwks = await _get_json(client, jwks_uri)

    if not isinstance(jwks.get("keys"), list):
        raise OidcError("JWKS document has no keys.")
    return jwks


def signing_key_for(token: str, jwks: dict[str, Any]) -> jwt.PyJWK:
    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as exc:
        raise OidcError("Identity token header is malformed.") from exc

    kid = header.get("kid")
    keys = [k for k in jwks.get("keys", []) if isinstance(k, dict)]
    for key in keys:
        if kid is None or key.get("kid") == kid:
            try:
                return jwt.PyJWK(key)
            except (jwt.PyJWKError, jwt.InvalidKeyError) as exc:
                raise OidcError("Identity provider key is unusable.") from exc
    raise OidcError("No identity provider key matches the token.")


def _decode(token: str, key: Any, algorithms: list[str]) -> dict[str, Any]:
    aud = audience() or None
    iss = issuer() or None
    try:
        return jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience=aud,
            issuer=iss,
            options={"verify_aud": aud is not None, "require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise OidcError(f"Invalid identity token: {exc}") from exc


async def verify_identity_token(token: str) -> dict[str, Any]:
    """
    Verify an identity token and return its claims.
    """
    raw = (token or "").strip()
    if not raw:
        raise OidcError("Identity token is empty.")

    secret = shared_secret()
    if secret:
        return _decode(raw, secret, ["HS256"])

    jwks = await fetch_jwks(issuer_url=issuer())
    key = signing_key_for(raw, jwks)
    return _decode(raw, key.key, ASYMMETRIC_ALGORITHMS)
