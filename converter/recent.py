# converter/recent.py
from django.conf import settings

SESSION_KEY = "recently_viewed"


def _limit() -> int:
    return int(getattr(settings, "RECENTLY_VIEWED_LIMIT", 10) or 10)


def get_recent(request) -> list:
    return list(request.session.get(SESSION_KEY, []))


def remember(request, number) -> list:
    """Move number to the front of the list, no duplicates, capped."""
    value = str(number)
    recent = [value] + [n for n in get_recent(request) if n != value]
    recent = recent[:_limit()]
    request.session[SESSION_KEY] = recent
    return recent
