import os

from dotenv import load_dotenv

# Charger les variables d'environnement depuis .env (si present)
load_dotenv()

from django.core.wsgi import get_wsgi_application  # noqa: E402

os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    os.getenv("DJANGO_SETTINGS_MODULE", "config.settings.local"),
)

application = get_wsgi_application()
