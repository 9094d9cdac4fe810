"""Section kinds produced by the classifier.

Thread Safety:
SectionKind is an enum (inherently immutable).

"""

from enum import Enum


class SectionKind(Enum):
    """Kinds of section a line run can be classified as.

    Values match the kind names used by rendering surfaces and in
    serialized pages.

    """

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    QUESTION = "question"
    COURSE = "course"
    LIST_ITEM = "listItem"
    CODE = "code"
    TABLE = "table"
    TEXT = "text"


# Blocks that are never divided across pages
UNSPLITTABLE_KINDS = frozenset({SectionKind.CODE, SectionKind.TABLE})

# Single-line kinds that are kept whole even when a line is overlong
LINE_ATOMIC_KINDS = frozenset(
    {
        SectionKind.HEADING1,
        SectionKind.HEADING2,
        SectionKind.QUESTION,
        SectionKind.COURSE,
    }
)
