from django.core.management.base import BaseCommand

from catalog.models import Category

DEFAULT_CATEGORIES = {
    "Electronique": "Téléphones, ordinateurs, accessoires",
    "Livres": "Romans, essais et BD",
    "Maison": "Cuisine, décoration, rangement",
    "Sport": "Équipement et vêtements de sport",
    "Jouets": "Jeux et jouets pour enfants",
}


class Command(BaseCommand):
    help = "Crée les catégories par défaut (idempotent: relancer ne crée pas de doublons)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--names",
            type=str,
            default="",
            help="Liste de noms séparés par des virgules (sinon: catégories par défaut)",
        )

    def handle(self, *args, **opts):
        names = [n.strip() for n in str(opts["names"]).split(",") if n.strip()]
        wanted = {n: "" for n in names} if names else DEFAULT_CATEGORIES

        self.stdout.write(self.style.NOTICE(f"Seed de {len(wanted)} catégorie(s)"))

        created_count = 0
        for name, description in wanted.items():
            category, created = Category.objects.get_or_create_by_name(name, description=description)
            created_count += int(created)
            label = "créée" if created else "existante"
            self.stdout.write(f"  - {category.name} ({category.slug}): {label}")

        existing = len(wanted) - created_count
        self.stdout.write(self.style.SUCCESS(f"{created_count} créée(s), {existing} déjà présente(s)"))
