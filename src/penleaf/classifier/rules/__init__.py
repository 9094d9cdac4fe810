"""Line classification rule mixins.

Each mixin inspects a single line and reports a match without touching
scanner position or state. The scanners decide what to do with a match.
"""

from penleaf.classifier.rules.course import CourseRuleMixin
from penleaf.classifier.rules.fence import FenceRuleMixin
from penleaf.classifier.rules.heading import HeadingRuleMixin
from penleaf.classifier.rules.list_item import ListRuleMixin
from penleaf.classifier.rules.marked import MarkedLine
from penleaf.classifier.rules.question import QuestionRuleMixin
from penleaf.classifier.rules.table import TableRuleMixin

__all__ = [
    "CourseRuleMixin",
    "FenceRuleMixin",
    "HeadingRuleMixin",
    "ListRuleMixin",
    "MarkedLine",
    "QuestionRuleMixin",
    "TableRuleMixin",
]
