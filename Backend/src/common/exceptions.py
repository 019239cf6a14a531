import logging
from typing import Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class UserFacingAPIException(APIException):
    """
    Exception controllable et propre pour retourner un message a l'utilisateur.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Une erreur est survenue."
    default_code = "error"


def _django_validation_detail(exc: DjangoValidationError):
    # ValidationError({"champ": [...]}) -> dict ; ValidationError("msg") -> liste
    if hasattr(exc, "error_dict"):
        return exc.message_dict
    return {"non_field_errors": exc.messages}


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Enveloppe les erreurs DRF dans un format stable:
        {"error": {"code": ..., "detail": ..., "status": ...}}

    Active via REST_FRAMEWORK['EXCEPTION_HANDLER'] (config/settings/base.py).
    """
    if isinstance(exc, DjangoValidationError):
        # Levee par Model.save() -> full_clean() quand une vue n'est pas passee par le serializer
        return Response(
            {
                "error": {
                    "code": "invalid",
                    "detail": _django_validation_detail(exc),
                    "status": status.HTTP_400_BAD_REQUEST,
                }
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)

    if response is not None:
        data = {
            "error": {
                "code": getattr(exc, "default_code", "error"),
                "detail": response.data,
                "status": response.status_code,
            }
        }
        response.data = data
        return response

    # Erreur non geree -> 500
    view = context.get("view")
    logger.error(f"[api] Erreur non geree dans {type(view).__name__}: {exc}", exc_info=exc)
    return Response(
        {"error": {"code": "server_error", "detail": "Erreur interne", "status": 500}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
