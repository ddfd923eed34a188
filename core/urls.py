"""
URL configuration for the numtoword project.

    /                      -> converter.views.home
    /<n>-in-words/         -> converter.views.number_page
    /api/numbers/<n>/      -> converter.views.number_api
"""
from django.urls import path, include

urlpatterns = [
    path("", include("converter.urls", namespace="converter")),
]
