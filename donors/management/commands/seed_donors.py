# donors/management/commands/seed_donors.py
"""
Load a sample roster of donors for local development
Usage: python manage.py seed_donors [--clear]
"""
from datetime import datetime

from django.core.management.base import BaseCommand
from django.utils import timezone

from donors.exceptions import DuplicateDonorError
from donors.models import Donor
from donors.registration import register_donor


def _day(value):
    return timezone.make_aware(datetime.strptime(value, '%Y-%m-%d'))


SAMPLE_DONORS = [
    # Toronto
    {'name': 'Sarah Johnson', 'blood_group': 'O_POSITIVE', 'location': 'Toronto, ON',
     'phone': '+1 (416) 555-0101', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample.jpg'},
    {'name': 'Michael Chen', 'blood_group': 'A_POSITIVE', 'location': 'Toronto, ON',
     'phone': '+1 (416) 555-0102'},
    {'name': 'Emily Rodriguez', 'blood_group': 'B_POSITIVE', 'location': 'Toronto, ON',
     'phone': '+1 (416) 555-0103', 'is_available': False, 'last_donation_date': _day('2024-11-15')},
    {'name': 'David Kim', 'blood_group': 'AB_POSITIVE', 'location': 'Toronto, ON',
     'phone': '+1 (416) 555-0104'},
    {'name': 'Jessica Brown', 'blood_group': 'O_NEGATIVE', 'location': 'Toronto, ON',
     'phone': '+1 (416) 555-0105', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample2.jpg'},

    # Mississauga
    {'name': 'Robert Wilson', 'blood_group': 'A_NEGATIVE', 'location': 'Mississauga, ON',
     'phone': '+1 (905) 555-0201'},
    {'name': 'Amanda Lee', 'blood_group': 'B_NEGATIVE', 'location': 'Mississauga, ON',
     'phone': '+1 (905) 555-0202'},
    {'name': 'James Taylor', 'blood_group': 'AB_NEGATIVE', 'location': 'Mississauga, ON',
     'phone': '+1 (905) 555-0203', 'is_available': False},
    {'name': 'Lisa Anderson', 'blood_group': 'O_POSITIVE', 'location': 'Mississauga, ON',
     'phone': '+1 (905) 555-0204', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample3.jpg'},

    # Brampton
    {'name': 'Christopher Martin', 'blood_group': 'A_POSITIVE', 'location': 'Brampton, ON',
     'phone': '+1 (905) 555-0301'},
    {'name': 'Jennifer Garcia', 'blood_group': 'B_POSITIVE', 'location': 'Brampton, ON',
     'phone': '+1 (905) 555-0302'},
    {'name': 'Daniel Martinez', 'blood_group': 'O_NEGATIVE', 'location': 'Brampton, ON',
     'phone': '+1 (905) 555-0303', 'last_donation_date': _day('2024-10-01')},

    # Markham
    {'name': 'Michelle Wong', 'blood_group': 'AB_POSITIVE', 'location': 'Markham, ON',
     'phone': '+1 (905) 555-0401'},
    {'name': 'Kevin Patel', 'blood_group': 'A_NEGATIVE', 'location': 'Markham, ON',
     'phone': '+1 (905) 555-0402', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample4.jpg'},
    {'name': 'Rachel Thompson', 'blood_group': 'B_NEGATIVE', 'location': 'Markham, ON',
     'phone': '+1 (905) 555-0403', 'is_available': False},

    # Vaughan
    {'name': 'Andrew Jackson', 'blood_group': 'O_POSITIVE', 'location': 'Vaughan, ON',
     'phone': '+1 (905) 555-0501'},
    {'name': 'Olivia White', 'blood_group': 'A_POSITIVE', 'location': 'Vaughan, ON',
     'phone': '+1 (905) 555-0502', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample5.jpg'},
    {'name': 'Brandon Harris', 'blood_group': 'B_POSITIVE', 'location': 'Vaughan, ON',
     'phone': '+1 (905) 555-0503'},

    # Richmond Hill
    {'name': 'Sophia Clark', 'blood_group': 'AB_NEGATIVE', 'location': 'Richmond Hill, ON',
     'phone': '+1 (905) 555-0601'},
    {'name': 'Matthew Lewis', 'blood_group': 'O_NEGATIVE', 'location': 'Richmond Hill, ON',
     'phone': '+1 (905) 555-0602'},

    # Ajax
    {'name': 'Nicole Robinson', 'blood_group': 'A_POSITIVE', 'location': 'Ajax, ON',
     'phone': '+1 (905) 555-0701'},
    {'name': 'Joshua Walker', 'blood_group': 'B_POSITIVE', 'location': 'Ajax, ON',
     'phone': '+1 (905) 555-0702', 'is_available': False, 'last_donation_date': _day('2024-12-01')},

    # Pickering
    {'name': 'Ashley Hall', 'blood_group': 'O_POSITIVE', 'location': 'Pickering, ON',
     'phone': '+1 (905) 555-0801', 'photo_url': 'https://res.cloudinary.com/demo/image/upload/sample6.jpg'},
    {'name': 'Ryan Young', 'blood_group': 'AB_POSITIVE', 'location': 'Pickering, ON',
     'phone': '+1 (905) 555-0802'},
    {'name': 'Victoria King', 'blood_group': 'A_NEGATIVE', 'location': 'Pickering, ON',
     'phone': '+1 (905) 555-0803'},
]


class Command(BaseCommand):
    help = 'Seed the database with sample donors (existing donors are left untouched)'

    def add_arguments(self, parser):
        parser.add_argument('--clear', action='store_true', help='Delete all donors before seeding')

    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Donor.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} existing donor(s)'))

        self.stdout.write('Starting seed...')

        created = 0
        skipped = 0

        for sample in SAMPLE_DONORS:
            data = dict(sample)
            if data.get('photo_url'):
                data['photo_public_id'] = 'demo/' + '-'.join(data['name'].lower().split())

            try:
                donor = register_donor(consent_given=True, **data)
            except DuplicateDonorError:
                skipped += 1
                self.stdout.write(f'↷ Skipped existing: {data["name"]}')
                continue

            created += 1
            self.stdout.write(f'✓ Created: {donor.name} ({donor.get_blood_group_display()}) - {donor.location_display}')

        self.stdout.write(self.style.SUCCESS(
            f'\nSeed complete!\n'
            f'Created: {created}\n'
            f'Skipped: {skipped}\n'
            f'Total donors: {Donor.objects.count()}'
        ))
