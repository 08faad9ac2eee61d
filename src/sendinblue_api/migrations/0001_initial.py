from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="EnabledList",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("list_id", models.CharField(max_length=64, unique=True, verbose_name="list id")),
                ("name", models.CharField(blank=True, max_length=255, verbose_name="name")),
                ("enabled", models.BooleanField(default=False, verbose_name="enabled")),
            ],
            options={
                "verbose_name": "enabled list",
                "verbose_name_plural": "enabled lists",
                "ordering": ["list_id"],
            },
        ),
        migrations.CreateModel(
            name="StoredConfiguration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("api_key", models.CharField(blank=True, max_length=255, verbose_name="API key")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Sendinblue API configuration",
                "verbose_name_plural": "Sendinblue API configuration",
            },
        ),
    ]
