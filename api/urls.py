# api/urls.py

from django.urls import path
from . import views

app_name = 'api'

urlpatterns = [
    path('donors/', views.donor_register, name='donor-register'),
    path('donors/search/', views.donor_search, name='donor-search'),
]

# Available endpoints:
# POST /api/donors/          - Register a donor
# GET  /api/donors/search/   - Search compatible donors
#      ?bloodGroup=B_POSITIVE&location=toronto&includeUnavailable=true&limit=5&seed=0
