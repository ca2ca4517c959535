from app.config import DEFAULT_TRUNCATE_LENGTH, TRUNCATE_SUFFIX


def truncate(text: str, max_length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
    if not text or max_length <= 0:
        return ""

    if len(text) <= max_length:
        return text

    # No room for the suffix
    if max_length <= len(TRUNCATE_SUFFIX):
        return text[:max_length]

    return text[:max_length - len(TRUNCATE_SUFFIX)] + TRUNCATE_SUFFIX
