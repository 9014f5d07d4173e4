# backend/config/urls.py
"""
URL configuration for the immune response backend.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("api/immune/", include("apps.immune.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]
