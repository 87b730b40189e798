# api/views.py
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from donors.exceptions import DuplicateDonorError, InvalidDonorError
from donors.registration import register_donor
from donors.search import search_donors
from .serializers import (
    DonorRegistrationSerializer,
    DonorSearchQuerySerializer,
    DonorSearchResultSerializer,
)
from .throttling import DonorRegistrationRateThrottle, DonorSearchRateThrottle

logger = logging.getLogger(__name__)


# ============================================
# DONOR SEARCH
# GET /api/donors/search/?bloodGroup=B_POSITIVE&location=toronto&limit=5&seed=3
# ============================================
@api_view(['GET'])
@permission_classes([AllowAny])
@throttle_classes([DonorSearchRateThrottle])
def donor_search(request):
    """Search compatible, available donors; seed gives a reproducible order"""
    serializer = DonorSearchQuerySerializer(data=request.query_params)
    if not serializer.is_valid():
        return Response({
            'ok': False,
            'message': 'Invalid search parameters',
            'errors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    query = serializer.validated_data

    try:
        result = search_donors(
            blood_group=query.get('bloodGroup'),
            location=query.get('location'),
            include_unavailable=query['includeUnavailable'],
            limit=query['limit'],
            seed=query['seed'],
        )
    except Exception:
        logger.exception("Search API error")
        return Response(
            {'ok': False, 'message': 'Search failed. Please try again.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    donors = DonorSearchResultSerializer(
        result.donors,
        many=True,
        context={'compatibility': {donor.pk: flag for donor, flag in result.matches}},
    ).data

    return Response({
        'ok': True,
        'donors': donors,
        'count': result.count,
        'total': result.total,
        'query': {
            'bloodGroup': query.get('bloodGroup'),
            'location': query.get('location'),
            'includeUnavailable': query['includeUnavailable'],
        },
    })


# ============================================
# DONOR REGISTRATION
# POST /api/donors/
# ============================================
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([DonorRegistrationRateThrottle])
def donor_register(request):
    """Register a new donor"""
    serializer = DonorRegistrationSerializer(data=request.data)
    if not serializer.is_valid():
        return Response({
            'ok': False,
            'message': 'Please fix the errors below',
            'fieldErrors': serializer.errors,
        }, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data

    try:
        donor = register_donor(
            name=data['name'],
            blood_group=data['bloodGroup'],
            location=data['location'],
            phone=data['phone'],
            consent_given=data['consentGiven'],
            photo_url=data.get('photoUrl'),
            photo_public_id=data.get('photoPublicId'),
            last_donation_date=data.get('lastDonationDate'),
        )
    except DuplicateDonorError as e:
        logger.warning("Duplicate donor registration for %s in %r", e.blood_group, e.location_normalized)
        return Response({'ok': False, 'message': str(e)}, status=status.HTTP_409_CONFLICT)
    except InvalidDonorError as e:
        return Response({
            'ok': False,
            'message': 'Please fix the errors below',
            'fieldErrors': {e.field: [e.message]},
        }, status=status.HTTP_400_BAD_REQUEST)
    except Exception:
        logger.exception("Donor registration error")
        return Response(
            {'ok': False, 'message': 'An unexpected error occurred. Please try again.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response({
        'ok': True,
        'message': 'Successfully registered as a blood donor!',
        'donorId': str(donor.id),
    }, status=status.HTTP_201_CREATED)
