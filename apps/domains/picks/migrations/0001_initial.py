from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PickEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("entry_id", models.CharField(max_length=64, unique=True)),
                ("name", models.CharField(max_length=100)),
                ("is_master", models.BooleanField(db_index=True, default=False)),
                ("answers", models.JSONField(default=dict)),
                ("tiebreaker", models.FloatField(blank=True, null=True)),
            ],
            options={
                "db_table": "entries",
                "ordering": ["created_at", "id"],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("is_master", True)),
                        fields=("is_master",),
                        name="entries_single_master",
                    ),
                ],
            },
        ),
    ]
