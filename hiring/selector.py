"""Answer selection from the registration number's last two digits.

Even suffix → ANSWER_A (younger colleagues per department).
Odd suffix → the odd-branch answer, ANSWER_B unless the caller supplies one.
"""

from __future__ import annotations

from hiring.errors import RegistrationNumberError

SUFFIX_LENGTH = 2

ANSWER_A = (
    "SELECT e1.EMP_ID, e1.FIRST_NAME, e1.LAST_NAME, d.DEPARTMENT_NAME,\n"
    "COUNT(e2.EMP_ID) AS YOUNGER_EMPLOYEES_COUNT\n"
    "FROM EMPLOYEE e1\n"
    "JOIN DEPARTMENT d ON e1.DEPARTMENT = d.DEPARTMENT_ID\n"
    "LEFT JOIN EMPLOYEE e2 ON e2.DEPARTMENT = e1.DEPARTMENT AND e2.DOB > e1.DOB\n"
    "GROUP BY e1.EMP_ID, e1.FIRST_NAME, e1.LAST_NAME, d.DEPARTMENT_NAME\n"
    "ORDER BY e1.EMP_ID DESC"
)

# The odd-numbered question is not part of the available problem statement.
# Configure the real query through ODD_ANSWER / ODD_ANSWER_FILE.
ANSWER_B = "-- Solution for the odd registration number question is not specified"


def registration_suffix(registration_number: str) -> int:
    """Parse the last two characters (or the whole string if shorter)."""
    suffix = registration_number[-SUFFIX_LENGTH:]
    if not (suffix.isascii() and suffix.isdigit()):
        raise RegistrationNumberError(
            f"Registration number must end in digits, got {registration_number!r}"
        )
    return int(suffix)


def is_even_registration(registration_number: str) -> bool:
    return registration_suffix(registration_number) % 2 == 0


def select_answer(registration_number: str, odd_answer: str = ANSWER_B) -> str:
    """Return the SQL answer for a registration number."""
    if is_even_registration(registration_number):
        return ANSWER_A
    return odd_answer
