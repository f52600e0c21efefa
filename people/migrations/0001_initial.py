import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("base", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="JobRole",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("level", models.CharField(blank=True, max_length=64)),
                ("description", models.TextField(blank=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
            ],
            options={
                "db_table": "job_role",
                "ordering": ("title",),
            },
        ),
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="children", to="people.team")),
            ],
            options={
                "db_table": "team",
                "ordering": ("name",),
                "constraints": [models.UniqueConstraint(fields=("organization", "name"), name="uniq_team_name_per_org")],
            },
        ),
        migrations.CreateModel(
            name="Person",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(db_index=True, max_length=255)),
                ("email", models.EmailField(blank=True, max_length=254)),
                ("status", models.CharField(choices=[("active", "Active"), ("inactive", "Inactive"), ("on_leave", "On leave"), ("terminated", "Terminated")], db_index=True, default="active", max_length=16)),
                ("employee_type", models.CharField(blank=True, choices=[("FULL_TIME", "Full time"), ("PART_TIME", "Part time"), ("INTERN", "Intern"), ("CONSULTANT", "Consultant")], max_length=16)),
                ("birthday", models.DateField(blank=True, null=True)),
                ("start_date", models.DateField(blank=True, null=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("user", models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="person", to=settings.AUTH_USER_MODEL)),
                ("manager", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="reports", to="people.person")),
                ("team", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="people", to="people.team")),
                ("job_role", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="people", to="people.jobrole")),
            ],
            options={
                "db_table": "person",
                "ordering": ("name",),
                "indexes": [
                    models.Index(fields=["organization", "status"], name="person_organiz_3b1f0c_idx"),
                    models.Index(fields=["manager"], name="person_manager_7e2d41_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("pk", models.F("manager")), _negated=True), name="person_manager_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="OneOnOne",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("scheduled_at", models.DateTimeField(blank=True, db_index=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("manager", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="one_on_ones_as_manager", to="people.person")),
                ("report", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="one_on_ones_as_report", to="people.person")),
            ],
            options={
                "db_table": "one_on_one",
                "ordering": ("-scheduled_at",),
                "indexes": [
                    models.Index(fields=["manager", "report"], name="one_on_one_manager_5c9a2e_idx"),
                ],
            },
        ),
    ]
