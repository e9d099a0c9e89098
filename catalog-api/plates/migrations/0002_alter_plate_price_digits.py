from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("plates", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="plate",
            name="purchase_price",
            field=models.DecimalField(
                decimal_places=2,
                max_digits=15,
                validators=[
                    django.core.validators.MinValueValidator(0),
                    django.core.validators.MaxValueValidator(Decimal("8333333333333.32")),
                ],
            ),
        ),
        migrations.AlterField(
            model_name="plate",
            name="sale_price",
            field=models.DecimalField(
                decimal_places=2,
                max_digits=15,
                validators=[django.core.validators.MinValueValidator(0)],
            ),
        ),
    ]
