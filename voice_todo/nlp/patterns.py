"""Keyword and pattern tables for the task phrase parser.

Every table is ordered; the parser walks them top to bottom and the first
hit wins. All patterns are compiled case-insensitive and are matched against
whitespace-normalised text.
"""

from __future__ import annotations

import re
from typing import NamedTuple

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTHS = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_DAY = "|".join(WEEKDAYS)
_MONTH = "|".join(MONTHS)
_ORD = r"(?:st|nd|rd|th)?"


def _re(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def keyword_re(keyword: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive matcher for a literal keyword or phrase."""
    return _re(r"\b" + re.escape(keyword).replace(r"\ ", r"\s+") + r"\b")


class Rule(NamedTuple):
    pattern: re.Pattern[str]
    tag: str


# words allowed between "add"/"create"/"new" and "task"
TASK_QUALIFIERS = (
    "a",
    "an",
    "another",
    "new",
    "high",
    "medium",
    "low",
    "priority",
    "urgent",
    "important",
    "critical",
    "asap",
    "work",
    "office",
    "personal",
    "home",
    "family",
    "shopping",
    "learning",
    "social",
    "finance",
)
_QUALIFIER = "|".join(TASK_QUALIFIERS)

TRIGGERS: tuple[re.Pattern[str], ...] = (
    _re(rf"\b(?:add|create|new)(?:\s+(?:{_QUALIFIER})){{0,3}}\s+task\b"),
    _re(r"\b(?:add|create)\s+(?:a\s+)?to[\s-]?do\b"),
    _re(r"\bremind\s+me\s+to\b"),
    _re(r"\bi\s+need\s+to\b"),
    _re(r"\bdon'?t\s+forget\s+to\b"),
    _re(r"\bmake\s+sure\s+to\b"),
    _re(r"\bschedule\b"),
    _re(r"\bplan\s+to\b"),
    _re(r"\bset\s+(?:a\s+)?reminder\b"),
)

# tiers are evaluated in this order: high, medium, low
PRIORITY_TIERS: tuple[tuple[str, tuple[re.Pattern[str], ...]], ...] = (
    (
        "high",
        (
            keyword_re("high priority"),
            keyword_re("urgent"),
            keyword_re("important"),
            keyword_re("asap"),
            keyword_re("critical"),
            keyword_re("immediately"),
            _re(r"(?<!from )\bnow\b"),
            _re(r"(?<!low )(?<!medium )\bpriority\b"),
        ),
    ),
    (
        "medium",
        (
            keyword_re("medium priority"),
            keyword_re("soon"),
            keyword_re("moderate"),
            keyword_re("normal"),
        ),
    ),
    (
        "low",
        (
            keyword_re("low priority"),
            keyword_re("later"),
            keyword_re("eventually"),
            keyword_re("when possible"),
            keyword_re("sometime"),
        ),
    ),
)


class Category(NamedTuple):
    name: str
    labels: tuple[str, ...]  # removed from the title when matched
    keywords: tuple[str, ...]  # classify only


CATEGORIES: tuple[Category, ...] = (
    Category("work", ("work", "office"), ("meeting", "project", "deadline", "presentation", "email")),
    Category("personal", ("personal", "home", "family"), ("health", "exercise", "doctor")),
    Category("shopping", ("shopping",), ("buy", "purchase", "shop", "grocery", "groceries", "store", "market")),
    Category("learning", ("learning",), ("learn", "study", "read", "course", "book", "research")),
    Category("social", ("social",), ("call", "text", "meet", "visit", "party", "dinner", "lunch")),
    Category("finance", ("finance", "financial"), ("pay", "bill", "bills", "rent", "bank", "budget", "taxes")),
)

CATEGORY_RULES: tuple[tuple[str, tuple[tuple[re.Pattern[str], bool], ...]], ...] = tuple(
    (
        cat.name,
        tuple((keyword_re(word), True) for word in cat.labels)
        + tuple((keyword_re(word), False) for word in cat.keywords),
    )
    for cat in CATEGORIES
)

_UNITS = r"(day|days|week|weeks|month|months|year|years)"

DATE_RULES: tuple[Rule, ...] = (
    Rule(_re(r"\b(today|tonight)\b"), "today"),
    Rule(_re(r"\btomorrow\b"), "tomorrow"),
    Rule(_re(rf"(?<!next )(?<!this )\b({_DAY})\b"), "weekday"),
    Rule(_re(rf"\bnext ({_DAY})\b"), "next_weekday"),
    Rule(_re(rf"\bthis ({_DAY})\b"), "this_weekday"),
    Rule(_re(rf"\bin (\d+) {_UNITS}\b"), "relative"),
    Rule(_re(rf"\b(\d+) {_UNITS} from now\b"), "relative"),
    Rule(_re(r"\bnext (week|month|year)\b"), "next_period"),
    Rule(_re(r"\bthis (week|month|year)\b"), "this_period"),
    Rule(_re(rf"\b({_MONTH})\s+(\d{{1,2}}){_ORD}\b(?!\s+\d{{4}})"), "month_day"),
    Rule(_re(rf"\b(\d{{1,2}}){_ORD}\s+of\s+({_MONTH})\b(?!\s+\d{{4}})"), "day_of_month"),
    Rule(_re(rf"\b({_MONTH})\s+(\d{{1,2}}){_ORD}\s+(\d{{4}})\b"), "month_day_year"),
    Rule(_re(rf"\b(\d{{1,2}}){_ORD}\s+of\s+({_MONTH})\s+(\d{{4}})\b"), "day_of_month_year"),
    Rule(_re(r"\b(?:fourth of july|independence day)(?:\s+(\d{4}))?\b"), "july_fourth"),
    Rule(_re(r"\bchristmas(?: day)?(?:\s+(\d{4}))?\b"), "christmas"),
    Rule(_re(r"\bnew year(?:'?s)?(?: day)?(?:\s+(\d{4}))?\b"), "new_year"),
    Rule(_re(r"\bhalloween(?:\s+(\d{4}))?\b"), "halloween"),
    Rule(_re(r"\b(\d{1,2})/(\d{1,2})/(\d{4})\b"), "date_slash"),
    Rule(_re(r"\b(\d{1,2})-(\d{1,2})-(\d{4})\b"), "date_dash"),
    Rule(_re(r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b"), "iso_date"),
)

TIME_RULES: tuple[Rule, ...] = (
    Rule(_re(r"\bat (\d{1,2}):(\d{2})\s*(am|pm)?\b"), "clock"),
    Rule(_re(r"\bat (\d{1,2})\s*(am|pm)\b"), "hour"),
    Rule(_re(r"\b(\d{1,2}):(\d{2})\s*(am|pm)\b"), "clock"),
    Rule(_re(r"\b(\d{1,2})\s*(am|pm)\b"), "hour"),
    Rule(_re(r"\b(\d{1,2}):(\d{2})\b"), "clock"),
    Rule(_re(r"\b(?:at )?(noon|midnight)\b"), "named"),
    Rule(_re(r"\bin the (morning|afternoon|evening|night)\b"), "named"),
    Rule(_re(r"\b(morning|afternoon|evening|tonight)\b"), "named"),
    Rule(_re(r"\bin (\d+) (hour|hours|minute|minutes)\b"), "relative"),
)

NAMED_TIMES = {
    "morning": "09:00",
    "noon": "12:00",
    "afternoon": "14:00",
    "evening": "18:00",
    "night": "20:00",
    "tonight": "20:00",
    "midnight": "00:00",
}

DESCRIPTION_MARKERS: tuple[re.Pattern[str], ...] = (
    _re(r"\bdescription\b:?\s*([^:\s].*)"),
    _re(r"\bnote\b:?\s*([^:\s].*)"),
    _re(r"\bdetails\b:?\s*([^:\s].*)"),
    _re(r"\bwith:\s*(\S.*)"),
)

COMMAND_EXAMPLES = (
    "Add urgent task: Finish presentation tomorrow 10 AM",
    "Remind me to call mom two days from now at 2 PM",
    "Create task: Buy groceries next Monday morning",
    "Schedule meeting with team next week at 10:30 AM",
    "Don't forget to take medicine tonight at 8 PM",
    "I need to file taxes by April 15th",
    "Add task: Birthday party on July 4th 2026",
    "Create low priority task: Clean garage this weekend",
    "Remind me to exercise in 3 days at 7 AM",
    "Schedule dentist appointment next month in the afternoon",
    "Add work task: Submit report by Christmas",
    "Create task: Halloween costume shopping in October",
)
