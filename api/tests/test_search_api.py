from datetime import timedelta
from unittest import mock

from django.core.cache import cache
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from algorithms.blood_compatibility import BLOOD_GROUPS
from api.throttling import DonorSearchRateThrottle
from donors.tests.factories import make_donor

SEARCH_URL = reverse('api:donor-search')


class DonorSearchApiTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        for blood_group in sorted(BLOOD_GROUPS):
            make_donor(blood_group, name=f'Donor {blood_group}')

    def test_compatible_search(self):
        response = self.client.get(SEARCH_URL, {'bloodGroup': 'B_POSITIVE', 'limit': 2, 'seed': 7})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertTrue(body['ok'])
        self.assertEqual(body['count'], 2)
        self.assertEqual(body['total'], 4)
        self.assertEqual(body['query'], {
            'bloodGroup': 'B_POSITIVE',
            'location': None,
            'includeUnavailable': False,
        })
        for donor in body['donors']:
            self.assertIn(donor['bloodGroup'], {'B_POSITIVE', 'B_NEGATIVE', 'O_POSITIVE', 'O_NEGATIVE'})
            self.assertTrue(donor['isCompatible'])

    def test_result_fields(self):
        response = self.client.get(SEARCH_URL, {'bloodGroup': 'O_NEGATIVE'})

        donor = response.json()['donors'][0]
        self.assertEqual(set(donor), {
            'id', 'name', 'bloodGroup', 'locationDisplay', 'phoneDisplay', 'photoUrl',
            'isAvailable', 'lastDonationDate', 'createdAt', 'isCompatible',
        })
        self.assertNotIn('phoneDigits', donor)

    def test_defaults(self):
        response = self.client.get(SEARCH_URL)

        body = response.json()
        self.assertEqual(body['count'], 5)
        self.assertEqual(body['total'], 8)

    def test_seed_is_reproducible(self):
        params = {'limit': 8, 'seed': 3}
        first = [d['id'] for d in self.client.get(SEARCH_URL, params).json()['donors']]
        second = [d['id'] for d in self.client.get(SEARCH_URL, params).json()['donors']]

        self.assertEqual(first, second)

    def test_unavailable_only_with_flag(self):
        make_donor('AB_NEGATIVE', 'Ottawa, ON', is_available=False)

        hidden = self.client.get(SEARCH_URL, {'location': 'ottawa'}).json()
        shown = self.client.get(SEARCH_URL, {'location': 'ottawa', 'includeUnavailable': 'true'}).json()

        self.assertEqual(hidden['count'], 0)
        self.assertEqual(shown['count'], 1)
        self.assertTrue(shown['query']['includeUnavailable'])

    def test_recent_donors_excluded(self):
        make_donor('AB_NEGATIVE', 'Ottawa, ON', last_donation_date=timezone.now() - timedelta(days=30))

        body = self.client.get(SEARCH_URL, {'location': 'Ottawa', 'includeUnavailable': 'true'}).json()

        self.assertEqual(body['count'], 0)

    def test_invalid_parameters(self):
        cases = [
            {'bloodGroup': 'C_POSITIVE'},
            {'limit': 0},
            {'limit': 51},
            {'limit': 'many'},
            {'location': 'x'},
            {'seed': 'abc'},
        ]
        for params in cases:
            with self.subTest(params=params):
                response = self.client.get(SEARCH_URL, params)

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                body = response.json()
                self.assertFalse(body['ok'])
                self.assertEqual(body['message'], 'Invalid search parameters')
                self.assertIn(next(iter(params)), body['errors'])

    def test_storage_failure_returns_500(self):
        with mock.patch('api.views.search_donors', side_effect=RuntimeError('boom')):
            response = self.client.get(SEARCH_URL)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.json(), {'ok': False, 'message': 'Search failed. Please try again.'})


class DonorSearchThrottleTests(TestCase):
    def setUp(self):
        cache.clear()
        self.client = APIClient()
        patcher = mock.patch.object(DonorSearchRateThrottle, 'THROTTLE_RATES', {'donor_search': '2/minute'})
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_throttled_after_limit(self):
        for _ in range(2):
            self.assertEqual(self.client.get(SEARCH_URL).status_code, status.HTTP_200_OK)

        response = self.client.get(SEARCH_URL)

        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
        self.assertIn('Retry-After', response)
        body = response.json()
        self.assertFalse(body['ok'])
        self.assertGreater(body['retryAfter'], 0)
