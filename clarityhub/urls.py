# clarityhub/urls.py
from django.contrib import admin
from django.urls import path, include

from core.views import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", health_check, name="health"),
    path("api/", include("core.urls")),
]

handler404 = "core.views.route_not_found"
handler500 = "core.views.server_error"
