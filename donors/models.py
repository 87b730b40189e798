import logging
import uuid

from django.db import IntegrityError, models, transaction

from algorithms.blood_compatibility import BLOOD_GROUP_CHOICES
from algorithms.eligibility import eligibility_cutoff, is_eligible, next_eligible_date
from donors.exceptions import DuplicateDonorError

logger = logging.getLogger(__name__)


# ---------------------------
# Storage queries
# ---------------------------
class DonorQuerySet(models.QuerySet):

    def eligible(self, now=None):
        """Donors who never donated or whose last donation is older than the cooldown"""
        return self.filter(
            models.Q(last_donation_date__isnull=True) |
            models.Q(last_donation_date__lt=eligibility_cutoff(now))
        )

    def matching(self, candidate_filter):
        """
        Apply a CandidateFilter: blood groups, location substring,
        availability and the eligibility window (always).
        """
        queryset = self
        if candidate_filter.blood_groups is not None:
            queryset = queryset.filter(blood_group__in=candidate_filter.blood_groups)
        if candidate_filter.location:
            queryset = queryset.filter(location_normalized__contains=candidate_filter.location)
        if not candidate_filter.include_unavailable:
            queryset = queryset.filter(is_available=True)
        return queryset.eligible(candidate_filter.now)

    def find_candidates(self, candidate_filter, max_count):
        """Bulk fetch of up to max_count donors matching the filter, in a stable order"""
        return list(self.matching(candidate_filter).order_by('-created_at', 'id')[:max_count])


class DonorManager(models.Manager.from_queryset(DonorQuerySet)):

    def insert_if_absent(self, **fields):
        """
        Create a donor unless (phone_digits, blood_group, location_normalized)
        is already taken.

        Raises:
            DuplicateDonorError: when the triple exists
        """
        key = {
            'phone_digits': fields['phone_digits'],
            'blood_group': fields['blood_group'],
            'location_normalized': fields['location_normalized'],
        }
        existing = self.filter(**key).first()
        if existing is not None:
            raise DuplicateDonorError(existing=existing, **key)

        try:
            with transaction.atomic():
                return self.create(**fields)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same triple
            logger.warning("Duplicate donor insert rejected by constraint for %s", key['blood_group'])
            raise DuplicateDonorError(existing=self.filter(**key).first(), **key)


# ---------------------------
# Donor
# ---------------------------
class Donor(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=100)
    blood_group = models.CharField(max_length=12, choices=BLOOD_GROUP_CHOICES, db_index=True)

    phone_digits = models.CharField(max_length=20)
    phone_display = models.CharField(max_length=30)

    location_normalized = models.CharField(max_length=200, db_index=True)
    location_display = models.CharField(max_length=200)

    photo_url = models.URLField(max_length=500, null=True, blank=True)
    photo_public_id = models.CharField(max_length=255, null=True, blank=True)

    consent_given = models.BooleanField(default=False)
    is_available = models.BooleanField(default=True)
    last_donation_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = DonorManager()

    @property
    def can_donate(self) -> bool:
        """Donors must wait 56 days between donations"""
        return is_eligible(self.last_donation_date)

    @property
    def next_eligible_date(self):
        return next_eligible_date(self.last_donation_date)

    def __str__(self):
        return f"{self.name} ({self.get_blood_group_display()})"

    class Meta:
        verbose_name = "Donor"
        verbose_name_plural = "Donors"
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['phone_digits', 'blood_group', 'location_normalized'],
                name='unique_donor_phone_blood_location',
            ),
        ]
        indexes = [
            models.Index(fields=['blood_group', 'is_available'], name='donor_blood_available_idx'),
        ]
