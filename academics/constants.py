REQUIRED_QUARTERS = (
    "1st Quarter",
    "2nd Quarter",
    "3rd Quarter",
    "4th Quarter",
)

GRADE_LEVELS = tuple(f"Grade {n}" for n in range(1, 7))

SECTIONS = (
    "Section A",
    "Section B",
    "Section C",
    "Section D",
    "Section E",
    "Section F",
)

SEX_MALE = "Male"
SEX_FEMALE = "Female"
SEXES = ((SEX_MALE, "Male"), (SEX_FEMALE, "Female"))

# admission form, in the order errors are reported
ADMISSION_REQUIRED_FIELDS = (
    "last_name",
    "first_name",
    "lrn",
    "birthdate",
    "grade_level",
    "section",
    "school_year",
)

REASON_MISSING_QUARTERS = "missing quarters"
REASON_FETCH_FAILED = "fetch failed"


def grade_number(grade_level: str) -> int:
    """'Grade 3' -> 3; anything unparsable sorts last."""
    try:
        return int((grade_level or "").split(" ")[1])
    except (IndexError, ValueError):
        return 99
