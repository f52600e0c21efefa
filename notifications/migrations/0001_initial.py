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
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField()),
                ("type", models.CharField(choices=[("info", "Info"), ("warning", "Warning"), ("success", "Success"), ("error", "Error")], default="info", max_length=16)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("deduplication_key", models.CharField(blank=True, db_index=True, max_length=512, null=True)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("user", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "notification",
                "ordering": ("-created_at",),
                "indexes": [models.Index(fields=["organization", "user"], name="notification_org_user_idx")],
            },
        ),
        migrations.CreateModel(
            name="NotificationResponse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("status", models.CharField(choices=[("unread", "Unread"), ("read", "Read"), ("dismissed", "Dismissed")], default="unread", max_length=16)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("dismissed_at", models.DateTimeField(blank=True, null=True)),
                ("notification", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="responses", to="notifications.notification")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notification_responses", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "notification_response",
                "constraints": [models.UniqueConstraint(fields=("notification", "user"), name="uniq_notification_response_user")],
            },
        ),
    ]
