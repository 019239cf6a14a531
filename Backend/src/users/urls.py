from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import ChangePasswordView, MeView, RegisterView

urlpatterns = [
    # Auth JWT (login / refresh)
    path("token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # Inscription (password write_only)
    path("register/", RegisterView.as_view(), name="register"),

    # Profil courant (id / username / is_staff read_only)
    path("me/", MeView.as_view(), name="me"),

    path("change-password/", ChangePasswordView.as_view(), name="change_password"),
]
