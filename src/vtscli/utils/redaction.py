"""Redaction of authentication tokens and other secrets in log output."""

from __future__ import annotations

import base64
import logging
import re
from typing import List, Optional, Pattern, Tuple

__all__ = ["RedactionFilter", "redact_text"]

REDACTED = "[REDACTED]"

_PATTERNS: List[Tuple[Pattern[str], str]] = [
    (
        re.compile(r"(?i)(authorization\s*:\s*Bearer)\s+[A-Za-z0-9._\-]+"),
        r"\1 " + REDACTED,
    ),
    (
        re.compile(r"(?i)((?:authentication)?[_-]?token[\"']?\s*[:=]\s*[\"']?)[A-Za-z0-9._\-]{8,}"),
        r"\1" + REDACTED,
    ),
]

_JWT_CANDIDATE_RE = re.compile(
    r"(?<![A-Za-z0-9_-])([A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+)(?![A-Za-z0-9_-])"
)


def _redact_jwts(text: str) -> str:
    """Replace likely JWTs with a redaction marker without touching hostnames."""

    def _decode(segment: str) -> Optional[bytes]:
        padding = "=" * (-len(segment) % 4)
        try:
            return base64.urlsafe_b64decode(segment + padding)
        except (ValueError, TypeError):
            return None

    def _maybe_redact(match: "re.Match[str]") -> str:
        token = match.group(1)
        header, payload, _sig = token.split(".")
        decoded_header = _decode(header)
        if not decoded_header or not decoded_header.strip().startswith(b"{"):
            return token
        if not _decode(payload):
            return token
        return REDACTED

    return _JWT_CANDIDATE_RE.sub(_maybe_redact, text)


def redact_text(text: str, secrets: Optional[List[str]] = None) -> str:
    """Mask known secret values plus anything that looks like a token."""
    out = text
    for secret in secrets or []:
        if secret:
            out = out.replace(secret, REDACTED)
    for pat, replacement in _PATTERNS:
        out = pat.sub(replacement, out)
    return _redact_jwts(out)


class RedactionFilter(logging.Filter):
    """Logging filter that scrubs secrets from the rendered message.

    Known secret values (e.g. the current token) can be registered at any
    time with ``add_secret``.
    """

    def __init__(self, secrets: Optional[List[str]] = None) -> None:
        super().__init__()
        self._secrets: List[str] = [s for s in (secrets or []) if s]

    def add_secret(self, secret: Optional[str]) -> None:
        if secret and secret not in self._secrets:
            self._secrets.append(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        scrubbed = redact_text(message, self._secrets)
        if scrubbed != message:
            record.msg = scrubbed
            record.args = None
        return True
