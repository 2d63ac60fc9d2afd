"""
Root URL configuration for the CloudAppHive API.
"""
from django.urls import include, path, re_path
from drf_spectacular.views import SpectacularJSONAPIView, SpectacularSwaggerView

from common.health import health_check

urlpatterns = [
    # Health check
    path("", health_check, name="health-check"),

    # OpenAPI schema & Swagger UI
    path("swagger/doc.json", SpectacularJSONAPIView.as_view(), name="schema"),
    re_path(
        r"^swagger/(?:index\.html)?$",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),

    # Application API routes
    path("", include("apps.applications.urls")),
]
