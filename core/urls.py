"""URL configuration: the Django admin, where feed records can be browsed."""

from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]
