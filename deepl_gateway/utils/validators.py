from urllib.parse import urlparse


def is_valid_url(value: str) -> bool:
    v = value.strip()
    try:
        parsed = urlparse(v)
        return bool(parsed.scheme and parsed.netloc)
    except ValueError:
        return False


def has_trailing_slash(value: str) -> bool:
    return value.endswith("/")


def is_valid_base_url(value: str) -> bool:
    if not value or has_trailing_slash(value):
        return False
    return is_valid_url(value)
