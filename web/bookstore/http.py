"""Small request helpers shared by the API views."""

from pydantic import ValidationError


def validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic ``ValidationError`` into ``"field: reason; ..."``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def page_params(request, default_limit: int = 10, max_limit: int = 100) -> tuple[int, int]:
    """Read ``page``/``limit`` query params, falling back to defaults on junk."""
    try:
        page = max(1, int(request.GET.get("page", 1)))
    except (TypeError, ValueError):
        page = 1
    try:
        limit = int(request.GET.get("limit", default_limit))
    except (TypeError, ValueError):
        limit = default_limit
    limit = min(max(1, limit), max_limit)
    return page, limit
