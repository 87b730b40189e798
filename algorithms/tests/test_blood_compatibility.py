from django.test import SimpleTestCase

from algorithms.blood_compatibility import (
    BLOOD_GROUPS,
    InvalidBloodGroup,
    compatible_donor_types,
    is_compatible,
)


class CompatibleDonorTypesTests(SimpleTestCase):
    def test_every_type_receives_from_itself(self):
        for blood_group in BLOOD_GROUPS:
            with self.subTest(blood_group=blood_group):
                self.assertIn(blood_group, compatible_donor_types(blood_group))

    def test_o_negative_is_universal_donor(self):
        for blood_group in BLOOD_GROUPS:
            with self.subTest(blood_group=blood_group):
                self.assertIn('O_NEGATIVE', compatible_donor_types(blood_group))

    def test_ab_positive_is_universal_recipient(self):
        self.assertEqual(compatible_donor_types('AB_POSITIVE'), BLOOD_GROUPS)
        self.assertEqual(len(BLOOD_GROUPS), 8)

    def test_o_negative_receives_only_o_negative(self):
        self.assertEqual(compatible_donor_types('O_NEGATIVE'), {'O_NEGATIVE'})

    def test_table(self):
        expected = {
            'O_POSITIVE': {'O_POSITIVE', 'O_NEGATIVE'},
            'A_NEGATIVE': {'A_NEGATIVE', 'O_NEGATIVE'},
            'A_POSITIVE': {'A_POSITIVE', 'A_NEGATIVE', 'O_POSITIVE', 'O_NEGATIVE'},
            'B_NEGATIVE': {'B_NEGATIVE', 'O_NEGATIVE'},
            'B_POSITIVE': {'B_POSITIVE', 'B_NEGATIVE', 'O_POSITIVE', 'O_NEGATIVE'},
            'AB_NEGATIVE': {'A_NEGATIVE', 'B_NEGATIVE', 'AB_NEGATIVE', 'O_NEGATIVE'},
        }
        for recipient, donors in expected.items():
            with self.subTest(recipient=recipient):
                self.assertEqual(compatible_donor_types(recipient), donors)

    def test_unknown_type_raises(self):
        for value in ('C_POSITIVE', 'A+', '', None):
            with self.subTest(value=value):
                with self.assertRaises(InvalidBloodGroup):
                    compatible_donor_types(value)

    def test_invalid_blood_group_is_value_error(self):
        with self.assertRaises(ValueError):
            compatible_donor_types('b_positive')


class IsCompatibleTests(SimpleTestCase):
    def test_is_compatible(self):
        self.assertTrue(is_compatible('O_POSITIVE', 'B_POSITIVE'))
        self.assertFalse(is_compatible('A_POSITIVE', 'B_POSITIVE'))
        self.assertFalse(is_compatible('O_POSITIVE', 'O_NEGATIVE'))

