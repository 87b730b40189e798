"""
Donor search - compatibility, availability and eligibility filtering
followed by a seeded shuffle for "refresh" variety
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import FrozenSet, List, Optional, Tuple

from django.utils import timezone

from algorithms.blood_compatibility import compatible_donor_types, is_compatible
from algorithms.shuffle import rank_candidates
from donors.models import Donor
from donors.utils import normalize_location

# Candidates fetched per requested result, gives the shuffle room to vary
OVERSAMPLE_FACTOR = 3

DEFAULT_LIMIT = 5
MAX_LIMIT = 50

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateFilter:
    """Predicate handed to the storage layer's find_candidates"""
    blood_groups: Optional[FrozenSet[str]]
    location: Optional[str]
    include_unavailable: bool
    now: datetime


@dataclass
class SearchResult:
    matches: List[Tuple[object, bool]]
    total: int

    @property
    def donors(self):
        return [donor for donor, _ in self.matches]

    @property
    def count(self):
        return len(self.matches)


def build_candidate_filter(blood_group=None, location=None, include_unavailable=False, now=None):
    """
    Translate a search query into a CandidateFilter.

    Raises:
        InvalidBloodGroup: for an unknown blood group
    """
    return CandidateFilter(
        blood_groups=compatible_donor_types(blood_group) if blood_group else None,
        location=normalize_location(location) if location else None,
        include_unavailable=include_unavailable,
        now=now or timezone.now(),
    )


def search_donors(blood_group=None, location=None, include_unavailable=False,
                  limit=DEFAULT_LIMIT, seed=0, now=None, store=None):
    """
    Find compatible, available and eligible donors.

    Steps:
    1. Expand the recipient blood group into compatible donor groups
    2. Match the normalized location as a substring
    3. Require availability unless include_unavailable
    4. Always apply the 56 day eligibility window
    5. Fetch limit * 3 candidates
    6. Seeded shuffle, truncate to limit
    7. Flag each donor with is_compatible (display only)

    Args:
        blood_group: Recipient blood group code or None
        location: Free text location substring or None
        include_unavailable: Also return donors marked unavailable
        limit: Number of results, validated to [1, 50] by the caller
        seed: Integer seed controlling the order
        now: Reference time for eligibility, defaults to timezone.now()
        store: Object exposing find_candidates(filter, max_count),
            defaults to Donor.objects

    Returns:
        SearchResult
    """
    if store is None:
        store = Donor.objects

    candidate_filter = build_candidate_filter(blood_group, location, include_unavailable, now)

    candidates = list(store.find_candidates(candidate_filter, limit * OVERSAMPLE_FACTOR))
    ranked = rank_candidates(candidates, seed, limit)

    matches = [
        (donor, not blood_group or is_compatible(donor.blood_group, blood_group))
        for donor in ranked
    ]

    logger.info(
        "Donor search blood_group=%s location=%r seed=%s: %d of %d candidates returned",
        blood_group, candidate_filter.location, seed, len(matches), len(candidates),
    )
    return SearchResult(matches=matches, total=len(candidates))
