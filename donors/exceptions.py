class DuplicateDonorError(Exception):
    """
    A donor with the same phone digits, blood group and normalized location
    is already registered.
    """

    def __init__(self, phone_digits, blood_group, location_normalized, existing=None):
        self.phone_digits = phone_digits
        self.blood_group = blood_group
        self.location_normalized = location_normalized
        self.existing = existing
        super().__init__(
            "A donor with this phone number, blood group, and location already exists."
        )


class InvalidDonorError(ValueError):
    """A registration field is unusable once sanitized"""

    def __init__(self, field, message):
        self.field = field
        self.message = message
        super().__init__(message)
