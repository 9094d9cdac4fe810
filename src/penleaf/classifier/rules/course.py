"""Course header rule mixin."""

from penleaf.classifier.modes import ASCII_DIGITS, ASCII_UPPERCASE


class CourseRuleMixin:
    """Mixin providing course header detection.

    Course headers open with a course code: two to four uppercase letters,
    a space, three digits and a colon, e.g. ``CS 101:`` or ``MATH 241:``.
    """

    def _is_course_line(self, stripped: str) -> bool:
        letters = 0
        while letters < len(stripped) and stripped[letters] in ASCII_UPPERCASE:
            letters += 1
        if not 2 <= letters <= 4:
            return False

        code = stripped[letters : letters + 5]
        return (
            len(code) == 5
            and code[0] == " "
            and all(char in ASCII_DIGITS for char in code[1:4])
            and code[4] == ":"
        )
