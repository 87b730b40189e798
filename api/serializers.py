# api/serializers.py
import re

from rest_framework import serializers

from algorithms.blood_compatibility import BLOOD_GROUP_CHOICES
from donors.models import Donor
from donors.search import DEFAULT_LIMIT, MAX_LIMIT
from donors.utils import is_valid_phone

NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")

BLOOD_GROUP_CODES = [code for code, _ in BLOOD_GROUP_CHOICES]


class QueryFlagField(serializers.Field):
    """Query string flag: only the literal 'true' switches it on"""

    def to_internal_value(self, data):
        return data == 'true' or data is True

    def to_representation(self, value):
        return bool(value)


class DonorSearchQuerySerializer(serializers.Serializer):
    """
    Validates search query parameters before they reach the search core.
    Unknown blood groups are rejected here.
    """
    bloodGroup = serializers.ChoiceField(choices=BLOOD_GROUP_CODES, required=False)
    location = serializers.CharField(
        min_length=2, required=False,
        error_messages={'min_length': 'Location must be at least 2 characters'},
    )
    includeUnavailable = QueryFlagField(required=False, default=False)
    limit = serializers.IntegerField(min_value=1, max_value=MAX_LIMIT, required=False, default=DEFAULT_LIMIT)
    seed = serializers.IntegerField(required=False, default=0)

    def to_internal_value(self, data):
        # Empty query parameters count as absent
        data = {key: value for key, value in data.items() if value != ''}
        return super().to_internal_value(data)


class DonorSearchResultSerializer(serializers.ModelSerializer):
    """Public projection of a donor in search results"""
    bloodGroup = serializers.CharField(source='blood_group')
    locationDisplay = serializers.CharField(source='location_display')
    phoneDisplay = serializers.CharField(source='phone_display')
    photoUrl = serializers.CharField(source='photo_url', allow_null=True)
    isAvailable = serializers.BooleanField(source='is_available')
    lastDonationDate = serializers.DateTimeField(source='last_donation_date', allow_null=True)
    createdAt = serializers.DateTimeField(source='created_at')
    isCompatible = serializers.SerializerMethodField()

    class Meta:
        model = Donor
        fields = [
            'id', 'name', 'bloodGroup', 'locationDisplay', 'phoneDisplay',
            'photoUrl', 'isAvailable', 'lastDonationDate', 'createdAt', 'isCompatible',
        ]

    def get_isCompatible(self, obj):
        return self.context.get('compatibility', {}).get(obj.pk, True)


class DonorRegistrationSerializer(serializers.Serializer):
    """
    Validates donor registration input
    """
    name = serializers.CharField(
        min_length=2, max_length=100,
        error_messages={
            'min_length': 'Name must be at least 2 characters',
            'max_length': 'Name must be less than 100 characters',
        },
    )
    bloodGroup = serializers.ChoiceField(choices=BLOOD_GROUP_CODES)
    location = serializers.CharField(
        min_length=2, max_length=200,
        error_messages={
            'min_length': 'Location must be at least 2 characters',
            'max_length': 'Location must be less than 200 characters',
        },
    )
    phone = serializers.CharField(
        min_length=10,
        error_messages={'min_length': 'Phone number must be at least 10 digits'},
    )
    photoUrl = serializers.URLField(required=False, allow_null=True, allow_blank=True)
    photoPublicId = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    lastDonationDate = serializers.DateTimeField(required=False, allow_null=True)
    consentGiven = serializers.BooleanField()

    def validate_name(self, value):
        if not NAME_PATTERN.match(value):
            raise serializers.ValidationError(
                'Name can only contain letters, spaces, hyphens, and apostrophes'
            )
        return value

    def validate_phone(self, value):
        if not is_valid_phone(value):
            raise serializers.ValidationError(
                'Please enter a valid phone number with country code (e.g., +91 98765 43210)'
            )
        return value

    def validate_consentGiven(self, value):
        if value is not True:
            raise serializers.ValidationError('Consent must be given to register as a donor')
        return value
