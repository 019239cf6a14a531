from .base import *  # noqa

# --- Charger .env (Backend/.env) et ÉCRASER les variables OS si besoin -----
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PATH = Path(__file__).resolve().parents[3] / ".env"  # -> dossier Backend/ (depuis src/config/settings/local.py)
# override=True pour écraser une variable déjà définie dans la session
if ENV_PATH.exists():
    load_dotenv(ENV_PATH, override=True)
    logger.info(f"[settings] .env chargé depuis {ENV_PATH}")

# --- Dev local ---
DEBUG = True
ALLOWED_HOSTS = ["127.0.0.1", "localhost", "host.docker.internal"]

# Si tu utilises Vite en dev
CSRF_TRUSTED_ORIGINS = [
    "http://127.0.0.1:5173",
    "http://localhost:5173",
]

# Ne pas ré-ajouter corsheaders ici (il est déjà dans base.py)

# CORS en dev
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# DRF: pas de session en dev (JWT + Basic suffisent pour curl / httpie)
REST_FRAMEWORK.update({
    "DEFAULT_AUTHENTICATION_CLASSES": (
        "rest_framework.authentication.BasicAuthentication",
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ),
})

# Relire les valeurs qui ont pu changer avec le .env
EMPLOYEE_MIN_AGE = env_int("EMPLOYEE_MIN_AGE", EMPLOYEE_MIN_AGE)  # noqa: F405
LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", LOG_LEVEL).upper()  # noqa: F405
LOGGING["root"]["level"] = LOG_LEVEL  # noqa: F405
