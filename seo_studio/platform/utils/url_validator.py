from typing import Tuple
from urllib.parse import urlparse


def normalize_url(url: str) -> Tuple[str, bool]:
    """Prefix https:// when the caller left the scheme out."""
    url = url.strip()

    parsed = urlparse(url)

    if not parsed.scheme:
        return f"https://{url}", True

    return url, False


def validate_url(url: str) -> Tuple[bool, str, str]:
    """Returns (is_valid, normalized_url, error_message)."""
    if not url or not url.strip():
        return False, "", "URL is required"

    normalized_url, _ = normalize_url(url)

    try:
        parsed = urlparse(normalized_url)
    except ValueError as e:
        return False, normalized_url, f"URL parsing error: {e}"

    if parsed.scheme not in ("http", "https"):
        return False, normalized_url, f"Invalid URL scheme: {parsed.scheme} (must be http or https)"

    if not parsed.netloc:
        return False, normalized_url, "Invalid URL format: missing domain"

    return True, normalized_url, ""
