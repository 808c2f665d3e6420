import django.db.models.deletion
from django.db import migrations, models

# Single definition of every rating aggregate shown for an item.
CREATE_ITEMS_SCORE = """
CREATE VIEW items_score AS
SELECT
    i.id AS item_id,
    CAST(COALESCE(AVG(r.rating), 0) AS REAL) AS score,
    COUNT(r.id) AS review_count,
    DENSE_RANK() OVER (ORDER BY COALESCE(AVG(r.rating), 0) DESC) AS "rank",
    DENSE_RANK() OVER (ORDER BY COUNT(r.id) DESC) AS popularity
FROM items i
LEFT JOIN reviews r ON r.item_id = i.id
GROUP BY i.id
"""

DROP_ITEMS_SCORE = "DROP VIEW IF EXISTS items_score"


class Migration(migrations.Migration):

    dependencies = [
        ("items", "0001_initial"),
        ("reviews", "0001_initial"),
    ]

    operations = [
        migrations.RunSQL(CREATE_ITEMS_SCORE, DROP_ITEMS_SCORE),
        migrations.CreateModel(
            name="ScoreSnapshot",
            fields=[
                (
                    "item",
                    models.OneToOneField(
                        db_column="item_id",
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        primary_key=True,
                        related_name="snapshot",
                        serialize=False,
                        to="items.item",
                    ),
                ),
                ("score", models.FloatField()),
                ("review_count", models.IntegerField()),
                ("rank", models.IntegerField()),
                ("popularity", models.IntegerField()),
            ],
            options={
                "db_table": "items_score",
                "managed": False,
            },
        ),
    ]
