import re

import phonenumbers

NON_DIGITS = re.compile(r'\D')
WHITESPACE = re.compile(r'\s+')

DEFAULT_COUNTRY_CODE = '1'  # North American numbering plan


# ============================================
# LOCATION
# ============================================
def normalize_location(location):
    """
    Normalize location for consistent database searching

    normalize_location("Toronto, ON") -> "toronto, on"
    normalize_location("  New York  ") -> "new york"
    """
    return location.lower().strip()


def clean_display_location(location):
    """Collapse whitespace but keep capitalization: "  Toronto,  ON " -> "Toronto, ON" """
    return WHITESPACE.sub(' ', location.strip())


# ============================================
# PHONE
# ============================================
def normalize_phone_digits(phone):
    """Keep digits only: "+1 (416) 555-0123" -> "14165550123" """
    return NON_DIGITS.sub('', phone)


def format_phone_display(phone):
    """
    International display form, falling back to the raw input.

    format_phone_display("4165550123") -> "+1 416-555-0123"
    format_phone_display("+91 98765 43210") -> "+91 98765 43210"
    """
    if phone.startswith('+'):
        candidate = phone
    else:
        digits = normalize_phone_digits(phone)
        if not digits.startswith(DEFAULT_COUNTRY_CODE):
            digits = DEFAULT_COUNTRY_CODE + digits
        candidate = f"+{digits}"

    try:
        number = phonenumbers.parse(candidate, None)
    except phonenumbers.NumberParseException:
        return phone
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.INTERNATIONAL)


def is_valid_phone(phone):
    """Phone must start with + and carry at least 10 digits"""
    return phone.startswith('+') and len(normalize_phone_digits(phone)) >= 10


# ============================================
# SANITIZATION
# ============================================
def sanitize_location(location):
    # letters, numbers, spaces, commas, hyphens, periods
    return re.sub(r'[^a-zA-Z0-9\s,.-]', '', location).strip()


def sanitize_name(name):
    # letters, spaces, hyphens, apostrophes (O'Brien, Mary-Jane)
    return re.sub(r"[^a-zA-Z\s'-]", '', name).strip()
