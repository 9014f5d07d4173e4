# backend/apps/immune/urls.py

"""
Immune app URLs
"""
from django.urls import path

from . import views

app_name = "immune"

urlpatterns = [
    path("", views.service_info, name="service-info"),
    path("respond/", views.respond, name="respond"),
]
