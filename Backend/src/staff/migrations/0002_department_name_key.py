from django.db import migrations, models


def fill_name_key(apps, schema_editor):
    Department = apps.get_model("staff", "Department")
    for obj in Department.objects.all():
        obj.name_key = obj.name.strip().casefold()
        obj.save(update_fields=["name_key"])


class Migration(migrations.Migration):

    dependencies = [
        ("staff", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="department",
            name="name_key",
            field=models.CharField(default="", editable=False, max_length=200),
            preserve_default=False,
        ),
        migrations.RunPython(fill_name_key, migrations.RunPython.noop),
        migrations.AlterField(
            model_name="department",
            name="name_key",
            field=models.CharField(editable=False, max_length=200, unique=True),
        ),
    ]
