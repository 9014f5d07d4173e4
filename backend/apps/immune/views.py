# apps/immune/views.py
"""
Immune API views

HTTP driving adapter for the immune service.
"""
import logging

from django.apps import apps
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.domain.models import Antigen, DomainException, InvalidAntigenError
from apps.infrastructure.container import get_service_info

from .serializers import AntibodySerializer, RespondRequestSerializer

logger = logging.getLogger(__name__)


def _immune_app():
    return apps.get_app_config("immune")


def _unavailable(error: DomainException) -> Response:
    logger.error(f"Immune service unavailable: {error}")
    return Response(
        {"error": str(error)},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@extend_schema(
    tags=["Immune"],
    summary="Respond to an antigen",
    description="Recall a stored antibody (effort 0) or produce a fresh one.",
    request=RespondRequestSerializer,
    responses={200: AntibodySerializer, 400: OpenApiTypes.OBJECT, 503: OpenApiTypes.OBJECT},
)
@api_view(["POST"])
@permission_classes([AllowAny])
def respond(request):
    """
    Respond to an antigen value

    Request format:
        {"antigen": 5}

    Response format:
        {"antigen": 5, "effort": 37, "recalled": false}
    """
    serializer = RespondRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        service = _immune_app().get_service()
    except DomainException as e:
        return _unavailable(e)

    try:
        antibody = service.respond(Antigen(serializer.validated_data["antigen"]))
    except InvalidAntigenError as e:
        logger.info(f"Rejected antigen: {e}")
        return Response(
            {"error": str(e), "antigen": e.value},
            status=status.HTTP_400_BAD_REQUEST,
        )

    return Response(antibody.to_dict())


@extend_schema(
    tags=["Immune"],
    summary="Immune service configuration",
    responses={200: OpenApiTypes.OBJECT, 503: OpenApiTypes.OBJECT},
)
@api_view(["GET"])
@permission_classes([AllowAny])
def service_info(request):
    """Show how the shared immune service is configured"""
    app_config = _immune_app()

    try:
        service = app_config.get_service()
    except DomainException as e:
        return _unavailable(e)

    info = get_service_info(app_config.service_config)
    info["max_value"] = service.max_value

    return Response(info)
