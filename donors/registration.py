import logging

from algorithms.blood_compatibility import validate_blood_group
from donors.exceptions import InvalidDonorError
from donors.models import Donor
from donors.utils import (
    clean_display_location,
    format_phone_display,
    normalize_location,
    normalize_phone_digits,
    sanitize_location,
    sanitize_name,
)

logger = logging.getLogger(__name__)

NAME_LENGTH = (2, 100)
LOCATION_LENGTH = (2, 200)


def check_length(field, label, value, bounds):
    low, high = bounds
    if len(value) < low:
        raise InvalidDonorError(field, f'{label} must be at least {low} characters')
    if len(value) > high:
        raise InvalidDonorError(field, f'{label} must be less than {high} characters')
    return value


def register_donor(name, blood_group, location, phone, consent_given,
                   photo_url=None, photo_public_id=None, last_donation_date=None,
                   is_available=True):
    """
    Sanitize and normalize registration data, then store the donor.

    Length rules are checked after sanitizing, so input made only of
    stripped characters is rejected even when it skipped API validation
    (bulk imports).

    Raises:
        DuplicateDonorError: same phone, blood group and location already registered
        InvalidBloodGroup: blood group is not one of the eight codes
        InvalidDonorError: name or location too short or too long once sanitized
    """
    validate_blood_group(blood_group)

    clean_name = check_length('name', 'Name', sanitize_name(name), NAME_LENGTH)
    clean_location = sanitize_location(location)
    display_location = check_length(
        'location', 'Location', clean_display_location(clean_location), LOCATION_LENGTH,
    )

    donor = Donor.objects.insert_if_absent(
        name=clean_name,
        blood_group=blood_group,
        phone_digits=normalize_phone_digits(phone),
        phone_display=format_phone_display(phone),
        location_normalized=normalize_location(clean_location),
        location_display=display_location,
        photo_url=photo_url or None,
        photo_public_id=photo_public_id or None,
        consent_given=consent_given,
        is_available=is_available,
        last_donation_date=last_donation_date,
    )

    logger.info("Registered donor %s (%s)", donor.id, blood_group)
    return donor
