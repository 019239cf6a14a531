from django.db import migrations, models


def fill_name_key(apps, schema_editor):
    Category = apps.get_model("catalog", "Category")
    for obj in Category.objects.all():
        obj.name_key = obj.name.strip().casefold()
        obj.save(update_fields=["name_key"])


class Migration(migrations.Migration):

    dependencies = [
        ("catalog", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="category",
            name="name_key",
            field=models.CharField(default="", editable=False, max_length=200),
            preserve_default=False,
        ),
        migrations.RunPython(fill_name_key, migrations.RunPython.noop),
        migrations.AlterField(
            model_name="category",
            name="name_key",
            field=models.CharField(editable=False, max_length=200, unique=True),
        ),
    ]
