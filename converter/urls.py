# converter/urls.py
from django.urls import path, re_path

from . import views

app_name = "converter"

urlpatterns = [
    path("", views.home, name="home"),
    path("api/numbers/<str:number>/", views.number_api, name="api"),
    re_path(r"^(?P<slug>[^/]+-in-words)/$", views.number_page, name="number"),
]
