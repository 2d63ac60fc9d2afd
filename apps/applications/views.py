"""
apps.applications.views
~~~~~~~~~~~~~~~~~~~~~~~~
Thin DRF API views for the Applications application.
All business logic is delegated to :mod:`apps.applications.services`.

Endpoints
---------
GET    /applications   – List registered applications
POST   /applications   – Register an application
"""
from __future__ import annotations

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.parsers import AnyMediaTypeJSONParser
from common.renderers import IndentedJSONRenderer
from . import services
from .apps import get_registry
from .serializers import (
    ApplicationConfigCreateSerializer,
    ApplicationConfigSerializer,
    ErrorResponseSerializer,
)


class ApplicationListCreateView(APIView):
    """GET /applications  –  POST /applications"""

    parser_classes = [AnyMediaTypeJSONParser]
    renderer_classes = [IndentedJSONRenderer]

    def get_registry(self):
        return get_registry()

    @extend_schema(
        summary="List Applications",
        description="Returns every registered application in registration order.",
        responses={200: ApplicationConfigSerializer(many=True)},
        tags=["Applications"],
    )
    def get(self, request: Request) -> Response:
        applications = services.list_applications(self.get_registry())
        return Response(ApplicationConfigSerializer(applications, many=True).data)

    @extend_schema(
        summary="Register Application",
        description=(
            "Parses the body into an application config and appends it to the "
            "registry.  The ``source`` variant is taken from ``kind`` or, when "
            "absent, inferred from the fields present."
        ),
        request=ApplicationConfigCreateSerializer,
        responses={
            201: ApplicationConfigSerializer,
            400: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Body is not JSON, has the wrong shape, or misses required fields.",
            ),
            409: OpenApiResponse(
                response=ErrorResponseSerializer,
                description="Name already registered (only when unique names are enforced).",
            ),
        },
        examples=[
            OpenApiExample(
                "GitHub source",
                request_only=True,
                value={
                    "name": "my-app",
                    "description": "My awesome app",
                    "domain": "example.com",
                    "port": 8080,
                    "platform": "Python",
                    "version": "3.x",
                    "source": {"kind": "github", "repo": "github.com/username/my-app", "branch": "main"},
                },
            ),
        ],
        tags=["Applications"],
    )
    def post(self, request: Request) -> Response:
        serializer = ApplicationConfigCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        application = services.register_application(
            self.get_registry(), serializer.validated_data
        )
        return Response(
            ApplicationConfigSerializer(application).data,
            status=status.HTTP_201_CREATED,
        )
