import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

SECRET_PARAMS = {"api_key"}


def redact_url(url: str) -> str:
    """
    Mask secret query parameters so a URL can be logged.
    """
    parts = urlsplit(url)
    if not parts.query:
        return url
    query = [
        (key, "***" if key in SECRET_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe="*")))


def capitalize_first(text: str) -> str:
    """
    Upper-case the first character only; 'mr-mime' -> 'Mr-mime'.
    """
    return text[:1].upper() + text[1:]


def format_measure(raw: float, divisor: int, unit: str) -> str:
    """
    Convert an API measure (hectograms, decimetres) and drop a trailing '.0'.
    """
    return f"{raw / divisor:g} {unit}"


def format_warning(text: str) -> str:
    return f"⚠️ {text}"
