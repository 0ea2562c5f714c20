from django.db import migrations, models

GRADE_CHOICES = [
    ("Grade 1", "Grade 1"),
    ("Grade 2", "Grade 2"),
    ("Grade 3", "Grade 3"),
    ("Grade 4", "Grade 4"),
    ("Grade 5", "Grade 5"),
    ("Grade 6", "Grade 6"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StudentRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("last_name", models.CharField(max_length=100)),
                ("first_name", models.CharField(max_length=100)),
                ("middle_name", models.CharField(blank=True, max_length=100)),
                ("lrn", models.CharField(max_length=20, unique=True)),
                ("birthdate", models.DateField()),
                (
                    "sex",
                    models.CharField(choices=[("Male", "Male"), ("Female", "Female")], default="Male", max_length=6),
                ),
                ("grade_level", models.CharField(choices=GRADE_CHOICES, max_length=20)),
                ("section", models.CharField(max_length=50)),
                ("school_year", models.CharField(max_length=9)),
                ("adviser", models.CharField(blank=True, max_length=150)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["last_name", "first_name"],
                "indexes": [
                    models.Index(fields=["grade_level", "section"], name="student_grade_section_idx"),
                    models.Index(fields=["last_name", "first_name"], name="student_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AdvisoryRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("lrn", models.CharField(db_index=True, max_length=20)),
                ("grade", models.CharField(max_length=20)),
                ("section", models.CharField(max_length=50)),
                ("adviser", models.CharField(blank=True, max_length=150)),
                ("school_year", models.CharField(max_length=9)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="GradeEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("lrn", models.CharField(max_length=20)),
                ("grade_level", models.CharField(choices=GRADE_CHOICES, max_length=20)),
                (
                    "quarter",
                    models.CharField(
                        choices=[
                            ("1st Quarter", "1st Quarter"),
                            ("2nd Quarter", "2nd Quarter"),
                            ("3rd Quarter", "3rd Quarter"),
                            ("4th Quarter", "4th Quarter"),
                        ],
                        max_length=12,
                    ),
                ),
                ("subject", models.CharField(blank=True, max_length=100)),
                ("grade", models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True)),
            ],
            options={
                "ordering": ["lrn", "grade_level", "quarter", "subject"],
                "indexes": [models.Index(fields=["lrn", "grade_level"], name="grade_lrn_level_idx")],
            },
        ),
    ]
