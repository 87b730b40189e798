"""
Blood Type Compatibility Helper
Determines which donor blood types can give to which recipient blood types
"""

A_POSITIVE = 'A_POSITIVE'
A_NEGATIVE = 'A_NEGATIVE'
B_POSITIVE = 'B_POSITIVE'
B_NEGATIVE = 'B_NEGATIVE'
AB_POSITIVE = 'AB_POSITIVE'
AB_NEGATIVE = 'AB_NEGATIVE'
O_POSITIVE = 'O_POSITIVE'
O_NEGATIVE = 'O_NEGATIVE'

BLOOD_GROUP_CHOICES = [
    (A_POSITIVE, 'A+'), (A_NEGATIVE, 'A-'),
    (B_POSITIVE, 'B+'), (B_NEGATIVE, 'B-'),
    (AB_POSITIVE, 'AB+'), (AB_NEGATIVE, 'AB-'),
    (O_POSITIVE, 'O+'), (O_NEGATIVE, 'O-'),
]

BLOOD_GROUPS = frozenset(code for code, _ in BLOOD_GROUP_CHOICES)

# Recipient -> donor types that can safely give to them
COMPATIBILITY = {
    O_NEGATIVE: frozenset([O_NEGATIVE]),  # Can only receive O-
    O_POSITIVE: frozenset([O_POSITIVE, O_NEGATIVE]),
    A_NEGATIVE: frozenset([A_NEGATIVE, O_NEGATIVE]),
    A_POSITIVE: frozenset([A_POSITIVE, A_NEGATIVE, O_POSITIVE, O_NEGATIVE]),
    B_NEGATIVE: frozenset([B_NEGATIVE, O_NEGATIVE]),
    B_POSITIVE: frozenset([B_POSITIVE, B_NEGATIVE, O_POSITIVE, O_NEGATIVE]),
    AB_NEGATIVE: frozenset([A_NEGATIVE, B_NEGATIVE, AB_NEGATIVE, O_NEGATIVE]),
    AB_POSITIVE: BLOOD_GROUPS,  # Universal recipient
}


class InvalidBloodGroup(ValueError):
    """Raised when a value is not one of the eight blood group codes"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown blood group: {value!r}")


def validate_blood_group(value):
    """Return the code unchanged, raise InvalidBloodGroup if unknown"""
    if value not in BLOOD_GROUPS:
        raise InvalidBloodGroup(value)
    return value


def compatible_donor_types(recipient_blood_type):
    """
    Get the set of blood types that can donate to a recipient

    Args:
        recipient_blood_type: Recipient's blood group code (e.g., 'B_POSITIVE')

    Returns:
        frozenset of compatible donor blood group codes, always including
        the recipient's own type

    Raises:
        InvalidBloodGroup: if the code is not recognised
    """
    return COMPATIBILITY[validate_blood_group(recipient_blood_type)]


def is_compatible(donor_blood_type, recipient_blood_type):
    """
    Check if donor blood type is compatible with recipient

    Returns:
        Boolean: True if compatible, False otherwise
    """
    return validate_blood_group(donor_blood_type) in compatible_donor_types(recipient_blood_type)
