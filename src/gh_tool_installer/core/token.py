"""GitHub token normalization and validation.

Two token shapes are accepted:
- fine-grained personal access tokens: ``github_pat_`` + [A-Za-z0-9_]+
- classic personal access tokens: ``ghp_`` + [A-Za-z0-9]+

Security: the token value is never logged or echoed in errors; only its
length and a short preview are.
"""

import re

from gh_tool_installer.constants import (
    CLASSIC_TOKEN_PATTERN,
    FINE_GRAINED_TOKEN_PATTERN,
    TOKEN_PREVIEW_LENGTH,
)
from gh_tool_installer.exceptions import InvalidCredentialFormat
from gh_tool_installer.logger import get_logger

logger = get_logger(__name__)

_QUOTE_CHARS = str.maketrans("", "", "\"'")
_TOKEN_PATTERNS = (
    re.compile(FINE_GRAINED_TOKEN_PATTERN),
    re.compile(CLASSIC_TOKEN_PATTERN),
)


def normalize_token(token: str) -> str:
    """Strip single and double quote characters from a token.

    Container tooling often passes the variable through with its quotes
    intact. The operation is idempotent.

    Args:
        token: Raw token value

    Returns:
        Token without quote characters

    """
    return token.translate(_QUOTE_CHARS)


def is_valid_token(token: str) -> bool:
    """Return whether a normalized token matches an accepted shape."""
    return any(pattern.fullmatch(token) for pattern in _TOKEN_PATTERNS)


def token_preview(token: str) -> str:
    """Return the only representation of a token that may be logged.

    At most half of the token is shown, so short values are never logged
    in full.
    """
    return f"{token[: min(TOKEN_PREVIEW_LENGTH, len(token) // 2)]}..."


def validate_github_token(raw_token: str) -> str:
    """Normalize and validate a token.

    Args:
        raw_token: Token as found in the environment

    Returns:
        The normalized token

    Raises:
        InvalidCredentialFormat: If the token matches neither shape

    """
    token = normalize_token(raw_token)
    logger.debug("Token length: %d", len(token))
    logger.debug("Token starts with: %s", token_preview(token))

    if not is_valid_token(token):
        raise InvalidCredentialFormat()

    return token
