from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    Utilisateur custom de l'application.

    - Hérite d'AbstractUser (username, email, password hashé, is_staff, etc.)
    - Le mot de passe n'est jamais exposé par l'API (voir RegisterSerializer / UserSerializer)
    """

    def __str__(self) -> str:
        # Affiche le username si présent, sinon l'email
        return self.username or self.email

    class Meta:
        verbose_name = "Utilisateur"
        verbose_name_plural = "Utilisateurs"
        ordering = ["id"]
