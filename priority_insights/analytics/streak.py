"""Daily login streak."""

from datetime import date, datetime
from typing import Optional, Union


def next_streak(
    last_login: Optional[Union[date, datetime]],
    today: Union[date, datetime],
    current: int,
) -> int:
    """Streak count after logging in on ``today``.

    Consecutive days extend the streak, a gap resets it to 1, and a repeat
    login on the same day (or a last login dated in the future) keeps it.
    """
    if last_login is None:
        return 1

    last_day = last_login.date() if isinstance(last_login, datetime) else last_login
    this_day = today.date() if isinstance(today, datetime) else today
    days = (this_day - last_day).days

    if days == 1:
        return current + 1
    if days > 1:
        return 1
    return max(1, current)
