import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("base", "0001_initial"),
        ("notifications", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ToleranceRule",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("rule_type", models.CharField(choices=[("max_reports", "Maximum reports"), ("manager_span", "Manager span of control"), ("one_on_one_frequency", "One on one frequency")], db_index=True, max_length=32)),
                ("enabled", models.BooleanField(db_index=True, default=True)),
                ("config", models.JSONField(blank=True, default=dict)),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
            ],
            options={
                "db_table": "tolerance_rule",
                "ordering": ("name",),
            },
        ),
        migrations.CreateModel(
            name="RuleException",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("severity", models.CharField(choices=[("warning", "Warning"), ("urgent", "Urgent")], default="warning", max_length=16)),
                ("entity_type", models.CharField(max_length=32)),
                ("entity_id", models.CharField(max_length=64)),
                ("message", models.TextField()),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("status", models.CharField(choices=[("active", "Active"), ("acknowledged", "Acknowledged"), ("ignored", "Ignored"), ("resolved", "Resolved")], db_index=True, default="active", max_length=16)),
                ("acknowledged_at", models.DateTimeField(blank=True, null=True)),
                ("resolved_at", models.DateTimeField(blank=True, null=True)),
                ("notification", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="rule_exceptions", to="notifications.notification")),
                ("organization", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(app_label)s_%(class)s_set", to="base.organization")),
                ("rule", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exceptions", to="tolerance.tolerancerule")),
            ],
            options={
                "db_table": "rule_exception",
                "ordering": ("-created_at",),
                "indexes": [models.Index(fields=["rule", "entity_type", "entity_id"], name="rule_exc_entity_idx")],
            },
        ),
    ]
