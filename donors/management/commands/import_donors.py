# donors/management/commands/import_donors.py
"""
Django management command to import donor data from CSV or Excel
Usage: python manage.py import_donors path/to/donors.xlsx

Expected columns: name, blood_group, location, phone
Optional columns: is_available, last_donation_date, photo_url
"""
from pathlib import Path

import pandas as pd
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from algorithms.blood_compatibility import BLOOD_GROUPS
from donors.exceptions import DuplicateDonorError, InvalidDonorError
from donors.registration import register_donor
from donors.utils import is_valid_phone

REQUIRED_COLUMNS = ['name', 'blood_group', 'location', 'phone']

# Spreadsheets usually carry the short labels
LABEL_TO_CODE = {
    'A+': 'A_POSITIVE', 'A-': 'A_NEGATIVE',
    'B+': 'B_POSITIVE', 'B-': 'B_NEGATIVE',
    'AB+': 'AB_POSITIVE', 'AB-': 'AB_NEGATIVE',
    'O+': 'O_POSITIVE', 'O-': 'O_NEGATIVE',
}


def read_table(path):
    if path.suffix.lower() in ('.xlsx', '.xls'):
        return pd.read_excel(path)
    return pd.read_csv(path)


def parse_blood_group(value):
    value = str(value).strip().upper()
    return LABEL_TO_CODE.get(value, value)


def parse_bool(value, default=True):
    if pd.isna(value):
        return default
    if isinstance(value, str):
        return value.strip().lower() in ('true', 'yes', '1', 'y')
    return bool(value)


def parse_timestamp(value):
    if pd.isna(value):
        return None
    parsed = pd.to_datetime(value).to_pydatetime()
    return parsed if timezone.is_aware(parsed) else timezone.make_aware(parsed)


class Command(BaseCommand):
    help = 'Import donors from a CSV or Excel file'

    def add_arguments(self, parser):
        parser.add_argument('source', type=str, help='Path to the .csv or .xlsx file')

    def handle(self, *args, **options):
        source = Path(options['source'])
        if not source.exists():
            raise CommandError(f'File not found: {source}')

        self.stdout.write(self.style.WARNING(f'Starting import from {source}...'))

        df = read_table(source)
        df.columns = [str(column).strip().lower() for column in df.columns]

        missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
        if missing:
            raise CommandError(f'Missing required columns: {", ".join(missing)}')

        self.stdout.write(f'Found {len(df)} rows in file')

        # Clean data (remove rows with missing critical data)
        df = df.dropna(subset=REQUIRED_COLUMNS)

        imported_count = 0
        duplicate_count = 0
        skipped_count = 0

        for index, row in df.iterrows():
            line = index + 2  # header is line 1
            blood_group = parse_blood_group(row['blood_group'])
            phone = str(row['phone']).strip()

            if blood_group not in BLOOD_GROUPS:
                self.stdout.write(self.style.WARNING(f'Skipping row {line}: Invalid blood group {row["blood_group"]}'))
                skipped_count += 1
                continue

            if not is_valid_phone(phone):
                self.stdout.write(self.style.WARNING(f'Skipping row {line}: Invalid phone {phone}'))
                skipped_count += 1
                continue

            try:
                last_donation_date = parse_timestamp(row.get('last_donation_date'))
            except (ValueError, TypeError) as e:
                self.stdout.write(self.style.WARNING(f'Skipping row {line}: Invalid date ({e})'))
                skipped_count += 1
                continue

            photo_url = row.get('photo_url')

            try:
                donor = register_donor(
                    name=str(row['name']),
                    blood_group=blood_group,
                    location=str(row['location']),
                    phone=phone,
                    consent_given=True,
                    photo_url=None if pd.isna(photo_url) else str(photo_url),
                    last_donation_date=last_donation_date,
                    is_available=parse_bool(row.get('is_available')),
                )
            except DuplicateDonorError:
                duplicate_count += 1
                self.stdout.write(f'↷ Duplicate at row {line}: {row["name"]}')
                continue
            except InvalidDonorError as e:
                self.stdout.write(self.style.WARNING(f'Skipping row {line}: {e}'))
                skipped_count += 1
                continue

            imported_count += 1
            self.stdout.write(f'✓ Created: {donor.name} ({donor.get_blood_group_display()})')

        self.stdout.write(
            self.style.SUCCESS(
                f'\nImport complete!\n'
                f'Created: {imported_count}\n'
                f'Duplicates: {duplicate_count}\n'
                f'Skipped: {skipped_count}'
            )
        )
