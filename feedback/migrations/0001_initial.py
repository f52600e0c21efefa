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
            name="FeedbackCampaign",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("active", "Active"), ("completed", "Completed"), ("cancelled", "Cancelled")], db_index=True, default="draft", max_length=16)),
                ("start_date", models.DateField()),
                ("end_date", models.DateField()),
                ("invitee_emails", models.JSONField(blank=True, default=list)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("target_person", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="feedback_campaigns", to="people.person")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="feedback_campaigns", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "feedback_campaign",
                "ordering": ("-created_at",),
            },
        ),
    ]
