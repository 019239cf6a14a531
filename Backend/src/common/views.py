import os

from django.conf import settings
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView


class PingView(APIView):
    """
    GET /api/common/ping -> {"pong": true, "request_id": "..."}
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({"pong": True, "request_id": getattr(request, "request_id", None)})


class InfoView(APIView):
    """
    GET /api/common/info -> infos minimales d'environnement (non sensibles)
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        return Response({
            "debug": bool(settings.DEBUG),
            "env": os.getenv("DJANGO_ENV", "local"),
            "apps": sorted(settings.INSTALLED_APPS),
            "employee_min_age": settings.EMPLOYEE_MIN_AGE,
        })
