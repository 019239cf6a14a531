import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health(request):
    """
    Endpoint de sante: verifie aussi que la base repond.
    GET /api/common/health -> {"status":"ok","service":"django","database":"ok"}
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"[health] Base indisponible: {e}")
        return JsonResponse(
            {"status": "degraded", "service": "django", "database": "down"},
            status=503,
        )
    return JsonResponse({"status": "ok", "service": "django", "database": "ok"})
