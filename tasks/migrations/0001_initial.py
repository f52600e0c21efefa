import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("base", "0001_initial"),
        ("people", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Initiative",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("summary", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("planned", "Planned"), ("in_progress", "In progress"), ("paused", "Paused"), ("done", "Done"), ("canceled", "Canceled")], db_index=True, default="planned", max_length=16)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("owner", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="owned_initiatives", to="people.person")),
            ],
            options={
                "db_table": "initiative",
                "ordering": ("title",),
            },
        ),
        migrations.CreateModel(
            name="Objective",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("key_result", models.TextField(blank=True)),
                ("sort_index", models.PositiveIntegerField(default=0)),
                ("initiative", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="objectives", to="tasks.initiative")),
            ],
            options={
                "db_table": "objective",
                "ordering": ("initiative", "sort_index", "id"),
            },
        ),
        migrations.CreateModel(
            name="Task",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("status", models.CharField(choices=[("todo", "To do"), ("doing", "Doing"), ("blocked", "Blocked"), ("done", "Done"), ("dropped", "Dropped")], db_index=True, default="todo", max_length=16)),
                ("priority", models.PositiveSmallIntegerField(choices=[(1, "Critical"), (2, "High"), (3, "Medium"), (4, "Low"), (5, "Very Low")], default=2)),
                ("due_date", models.DateTimeField(blank=True, db_index=True, null=True)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("assignee", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tasks", to="people.person")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_tasks", to=settings.AUTH_USER_MODEL)),
                ("initiative", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tasks", to="tasks.initiative")),
                ("objective", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="tasks", to="tasks.objective")),
            ],
            options={
                "db_table": "task",
                "ordering": ("priority", "due_date", "-created_at"),
                "indexes": [
                    models.Index(fields=["organization", "status"], name="task_organiz_8d4e21_idx"),
                    models.Index(fields=["assignee", "status"], name="task_assigne_1a7f93_idx"),
                ],
            },
        ),
    ]
