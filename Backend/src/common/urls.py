from django.urls import path

from .health import health
from .views import InfoView, PingView

urlpatterns = [
    path("health", health, name="health"),
    path("ping", PingView.as_view(), name="ping"),
    path("info", InfoView.as_view(), name="info"),
]
