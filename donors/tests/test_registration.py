from django.test import TestCase

from algorithms.blood_compatibility import InvalidBloodGroup
from donors.exceptions import DuplicateDonorError, InvalidDonorError
from donors.models import Donor
from donors.registration import register_donor


class RegisterDonorTests(TestCase):
    def register(self, **overrides):
        data = {
            'name': 'Sarah Johnson',
            'blood_group': 'O_POSITIVE',
            'location': '  Toronto,   ON ',
            'phone': '+1 (416) 555-0101',
            'consent_given': True,
        }
        data.update(overrides)
        return register_donor(**data)

    def test_normalizes_fields(self):
        donor = self.register()

        self.assertEqual(donor.phone_digits, '14165550101')
        self.assertEqual(donor.phone_display, '+1 416-555-0101')
        self.assertEqual(donor.location_display, 'Toronto, ON')
        self.assertEqual(donor.location_normalized, 'toronto,   on')
        self.assertTrue(donor.is_available)
        self.assertIsNone(donor.last_donation_date)

    def test_sanitizes_name(self):
        donor = self.register(name='Sarah<script>')

        self.assertEqual(donor.name, 'Sarahscript')

    def test_duplicate_is_reported(self):
        self.register()

        with self.assertRaises(DuplicateDonorError):
            self.register(name='Another Name', phone='+1 416 555 0101', location='toronto,   on')

        self.assertEqual(Donor.objects.count(), 1)

    def test_unknown_blood_group(self):
        with self.assertRaises(InvalidBloodGroup):
            self.register(blood_group='O+')

        self.assertFalse(Donor.objects.exists())

    def test_name_emptied_by_sanitizing_is_rejected(self):
        with self.assertRaises(InvalidDonorError) as ctx:
            self.register(name='1234')

        self.assertEqual(ctx.exception.field, 'name')
        self.assertEqual(str(ctx.exception), 'Name must be at least 2 characters')
        self.assertFalse(Donor.objects.exists())

    def test_location_emptied_by_sanitizing_is_rejected(self):
        with self.assertRaises(InvalidDonorError) as ctx:
            self.register(location='ééé')

        self.assertEqual(ctx.exception.field, 'location')
        self.assertFalse(Donor.objects.exists())

    def test_overlong_name_is_rejected(self):
        with self.assertRaises(InvalidDonorError) as ctx:
            self.register(name='a' * 101)

        self.assertEqual(str(ctx.exception), 'Name must be less than 100 characters')
