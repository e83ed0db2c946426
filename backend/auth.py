"""
Authentication module for Supabase access tokens.
Provides the bearer-token validation used by the FastAPI dependencies.

Supports two verification paths:
- Local: HS256 signature check with SUPABASE_JWT_SECRET (aud: "authenticated")
- Remote: Supabase Auth lookup (client.auth.get_user) when no secret is configured
"""
import jwt
from fastapi import HTTPException
from typing import Any, Optional
import logging

from backend.settings import Settings

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"
SUPABASE_JWT_AUDIENCE = "authenticated"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Return the token from an `Authorization: Bearer <token>` header."""
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide an Authorization header."
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Invalid authorization header format")
    return token.strip()


def validate_supabase_jwt(token: str, secret: str) -> str:
    """Validate a Supabase access token (HS256) and return user_id."""
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=SUPABASE_JWT_AUDIENCE,
        )
        user_id = payload.get("sub")
        if not user_id:
            raise HTTPException(status_code=401, detail="Token missing user ID")
        logger.debug(f"Supabase JWT validated for user: {user_id}")
        return user_id
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid Supabase JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")


def validate_with_supabase_auth(token: str, client: Any) -> str:
    """Ask Supabase Auth who owns the token and return user_id."""
    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Supabase Auth rejected token: {e}")
        raise HTTPException(status_code=401, detail="Invalid token")

    user = getattr(response, "user", None)
    user_id = getattr(user, "id", None)
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")
    return str(user_id)


def authenticate_request(
    authorization: Optional[str],
    settings: Settings,
    client: Optional[Any] = None,
) -> str:
    """
    Resolve the user_id for a request.

    Usage:
        user_id = authenticate_request(request.headers.get("authorization"), settings, client)
    """
    token = extract_bearer_token(authorization)

    if settings.supabase_jwt_secret:
        return validate_supabase_jwt(token, settings.supabase_jwt_secret)

    if client is not None:
        return validate_with_supabase_auth(token, client)

    logger.warning("No SUPABASE_JWT_SECRET and no Supabase client configured, cannot authenticate")
    raise HTTPException(status_code=401, detail="Authentication not configured")
