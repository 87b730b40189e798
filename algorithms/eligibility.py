from datetime import date, datetime, time, timedelta

from django.utils import timezone

# Constants
DONATION_COOLDOWN_DAYS = 56


def _as_datetime(value):
    # Plain dates count from midnight in the current timezone
    if isinstance(value, datetime):
        return value if timezone.is_aware(value) else timezone.make_aware(value)
    if isinstance(value, date):
        return timezone.make_aware(datetime.combine(value, time.min))
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def eligibility_cutoff(now=None) -> datetime:
    """
    Latest donation timestamp that still makes a donor ineligible.

    A donor whose last donation is strictly earlier than this value has
    waited out the minimum inter-donation interval.

    Args:
        now (datetime): Reference time, defaults to timezone.now()

    Returns:
        datetime: now - DONATION_COOLDOWN_DAYS
    """
    now = timezone.now() if now is None else _as_datetime(now)
    return now - timedelta(days=DONATION_COOLDOWN_DAYS)


def is_eligible(last_donation_date, now=None) -> bool:
    """
    Check whether a donor may donate again.

    Criteria:
    - Donor has never donated (last_donation_date is None), or
    - Last donation happened strictly before now - 56 days

    Args:
        last_donation_date (date | datetime | None): Donor's last donation
        now (datetime): Reference time, defaults to timezone.now()

    Returns:
        bool: True if eligible, False otherwise
    """
    if last_donation_date is None:
        return True
    return _as_datetime(last_donation_date) < eligibility_cutoff(now)


def next_eligible_date(last_donation_date):
    """First moment the donor becomes eligible again, None if never donated"""
    if last_donation_date is None:
        return None
    # Eligibility needs a strict gap, so exactly 56 days later is still too early
    return _as_datetime(last_donation_date) + timedelta(days=DONATION_COOLDOWN_DAYS, microseconds=1)
