"""
apps.applications.urls
~~~~~~~~~~~~~~~~~~~~~~~
URL routing for the Applications application.
Mounted at the site root by the root URLconf.
"""
from django.urls import path

from .views import ApplicationListCreateView

urlpatterns = [
    # GET, POST /applications
    path(
        "applications",
        ApplicationListCreateView.as_view(),
        name="application-list-create",
    ),
]
