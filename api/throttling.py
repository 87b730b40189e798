import re

from rest_framework.throttling import AnonRateThrottle

RATE_PATTERN = re.compile(r'^(?P<num>\d+)/(?P<mult>\d*)(?P<unit>[smhd])')

PERIOD_SECONDS = {'s': 1, 'm': 60, 'h': 3600, 'd': 86400}


class ClientIPRateThrottle(AnonRateThrottle):
    """
    Per client IP throttle, applied to every caller (authenticated or not).

    Rates accept a multiplied period, e.g. "3/30m" is three requests per
    thirty minutes.
    """

    # 429 message; may use {minutes}, the wait rounded up to whole minutes
    throttled_message = 'Too many requests. Please try again later.'

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        match = RATE_PATTERN.match(rate)
        if match is None:
            raise ValueError(f"Invalid throttle rate: {rate!r}")
        multiplier = int(match.group('mult') or 1)
        return int(match.group('num')), multiplier * PERIOD_SECONDS[match.group('unit')]

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }


class DonorSearchRateThrottle(ClientIPRateThrottle):
    scope = 'donor_search'


class DonorRegistrationRateThrottle(ClientIPRateThrottle):
    scope = 'donor_registration'
    throttled_message = 'Too many registration attempts. Please try again in {minutes} minutes.'
