from email_validator import EmailNotValidError, validate_email

from ..core.results import FieldViolation
from ..schemas.coach import CoachDTO

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
SPECIALIZATION_MAX_LENGTH = 100
PHONE_MAX_LENGTH = 15


def validate_coach(dto: CoachDTO) -> list[FieldViolation]:
    """Return one violation per invalid field, in declaration order."""
    violations: list[FieldViolation] = []

    name = (dto.name or "").strip()
    if not name:
        violations.append(FieldViolation("name", "Name is required"))
    elif not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "name",
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
            )
        )

    if dto.specialization is not None and len(dto.specialization) > SPECIALIZATION_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "specialization",
                f"Specialization must not exceed {SPECIALIZATION_MAX_LENGTH} characters",
            )
        )

    if dto.phone is not None and len(dto.phone) > PHONE_MAX_LENGTH:
        violations.append(
            FieldViolation("phone", f"Phone must not exceed {PHONE_MAX_LENGTH} characters")
        )

    if dto.email and not is_valid_email(dto.email):
        violations.append(FieldViolation("email", "Email should be valid"))

    return violations


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True
