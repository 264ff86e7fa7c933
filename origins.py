import re
from urllib.parse import urlsplit


def extract_hostname(value):
    """Lower-cased hostname of a URL header value, or None if unusable."""
    if not value:
        return None
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    return parts.hostname


def request_hostname(origin, referer):
    # a present Origin is authoritative, even when it does not parse
    if origin:
        return extract_hostname(origin)
    return extract_hostname(referer)


def is_allowed(origin, referer, allowed_domains):
    hostname = request_hostname(origin, referer)
    return hostname is not None and hostname in allowed_domains


def cors_origin_patterns(allowed_domains):
    """Regexes for flask-cors matching any scheme/port on allowed hosts."""
    return [r"^[a-zA-Z][a-zA-Z0-9+.-]*://%s(:\d+)?$" % re.escape(domain)
            for domain in sorted(allowed_domains)]
