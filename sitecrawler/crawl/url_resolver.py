"""
Address resolution against a base page

Resolved addresses are compared byte-for-byte: no trailing slash, case,
fragment or query-order normalization happens here.
"""

from typing import Optional
from urllib.parse import urljoin, urlparse

from .errors import InvalidInput, NormalizationError


ALLOWED_SEED_SCHEMES = ('http', 'https')


def resolve(raw: str, base: str) -> str:
    """Resolve ``raw`` against ``base`` into an absolute address.

    Raises NormalizationError when the candidate cannot be parsed or does not
    end up with a scheme. Hostless addresses such as ``mailto:`` are kept.
    """
    if raw is None or not raw.strip():
        raise NormalizationError(raw or "", "empty address")

    try:
        absolute = urljoin(base, raw.strip())
        parsed = urlparse(absolute)
        # Accessing .port validates the port component
        parsed.port
    except ValueError as e:
        raise NormalizationError(raw, str(e)) from e

    if not parsed.scheme:
        raise NormalizationError(raw, "no scheme")

    return absolute


def try_resolve(raw: str, base: str) -> Optional[str]:
    """Resolve or return None when the candidate has to be dropped"""
    try:
        return resolve(raw, base)
    except NormalizationError:
        return None


def host_of(url: str) -> str:
    """Host component used for same-origin comparison"""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def validate_seed(raw: str) -> str:
    """Check that a seed address is absolute http(s) with a host"""
    if raw is None or not str(raw).strip():
        raise InvalidInput("URL is required")

    candidate = str(raw).strip()
    try:
        parsed = urlparse(candidate)
        parsed.port
    except ValueError as e:
        raise InvalidInput(f"Invalid URL: {candidate}") from e

    if parsed.scheme not in ALLOWED_SEED_SCHEMES or not parsed.hostname:
        raise InvalidInput(f"Invalid URL: {candidate}")

    return candidate
