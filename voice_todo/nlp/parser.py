from __future__ import annotations

import logging
from datetime import datetime

from ..schemas import ParsedTask
from ..utils.text import capitalize_first, normalize_space, remove_spans, strip_fillers
from .dates import resolve_date, resolve_time, to_utc
from .patterns import (
    CATEGORY_RULES,
    COMMAND_EXAMPLES,
    DATE_RULES,
    DESCRIPTION_MARKERS,
    PRIORITY_TIERS,
    TIME_RULES,
    TRIGGERS,
    Rule,
)

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def _find_triggers(text: str) -> list[Span]:
    return [m.span() for pattern in TRIGGERS for m in pattern.finditer(text)]


def _extract_priority(text: str) -> tuple[str | None, list[Span]]:
    """First tier with a hit wins; keyword hits from every tier leave the title."""
    winner, spans = None, []
    for tier, patterns in PRIORITY_TIERS:
        hits = [m.span() for p in patterns for m in p.finditer(text)]
        if hits and winner is None:
            winner = tier
        spans += hits
    return winner, spans


def _extract_category(text: str) -> tuple[str | None, list[Span]]:
    for name, rules in CATEGORY_RULES:
        for pattern, is_label in rules:
            m = pattern.search(text)
            if m:
                return name, [m.span()] if is_label else []
    return None, []


def _first_valid(rules: tuple[Rule, ...], text: str, resolve) -> tuple[object | None, list[Span]]:
    """Walk a rule table in order; the first match that resolves wins."""
    for rule in rules:
        m = rule.pattern.search(text)
        if not m:
            continue
        try:
            return resolve(rule.tag, m), [m.span()]
        except (ValueError, OverflowError) as exc:
            logger.debug("Skipping %s match %r: %s", rule.tag, m.group(0), exc)
    return None, []


def _extract_description(text: str) -> tuple[str | None, list[Span]]:
    for pattern in DESCRIPTION_MARKERS:
        m = pattern.search(text)
        if m:
            tail = m.group(1).strip().lower()
            return capitalize_first(tail) or None, [(m.start(), len(text))]
    return None, []


def _score(text: str, title: str, is_command: bool, task: dict) -> tuple[int, list[str]]:
    score = 0
    reasons: list[str] = []

    if len(title) > 2:
        score += 30
        reasons.append("Clear task title identified")
    else:
        reasons.append("Task title unclear")

    if is_command:
        score += 20
        reasons.append("Clear task command detected")
    else:
        score += 10
        reasons.append("Implied task (no explicit command)")

    if task["priority"]:
        score += 15
        reasons.append(f"Priority detected: {task['priority']}")
    if task["due_date"]:
        score += 15
        reasons.append(f"Due date detected: {task['due_date']}")
    if task["due_time"]:
        score += 10
        reasons.append(f"Due time detected: {task['due_time']}")
    if task["category"]:
        score += 5
        reasons.append(f"Category detected: {task['category']}")
    if task["description"]:
        score += 5
        reasons.append("Additional description found")

    if len(text) < 10:
        score -= 10
        reasons.append("Very short input")
    if ":" in text and is_command:
        score += 5
        reasons.append("Well-structured command")

    return max(0, min(100, score)), reasons


def parse(transcript: str, now: datetime) -> ParsedTask:
    """
    Turn a spoken command into a structured task guess.

    - trigger phrases ("add task", "remind me to", ...) mark an explicit command
    - priority and category come from the keyword tables
    - the first date and time-of-day phrase, resolved against `now` (UTC)
    - an optional "note:"/"details:" tail becomes the description
    - whatever is left, tidied up, is the title
    """
    text = normalize_space(transcript)
    ref = to_utc(now)

    trigger_spans = _find_triggers(text)
    priority, priority_spans = _extract_priority(text)
    category, category_spans = _extract_category(text)
    due, date_spans = _first_valid(DATE_RULES, text, lambda tag, m: resolve_date(tag, m, ref.date()))
    due_time, time_spans = _first_valid(TIME_RULES, text, lambda tag, m: resolve_time(tag, m, ref))
    description, description_spans = _extract_description(text)

    spans = trigger_spans + priority_spans + category_spans + date_spans + time_spans + description_spans
    title = capitalize_first(strip_fillers(remove_spans(text, spans)))

    task = {
        "priority": priority,
        "category": category,
        "due_date": due.isoformat() if due else None,
        "due_time": due_time,
        "description": description,
    }
    # length and colon checks look at the trimmed input, inner spacing included
    confidence, reasons = _score(transcript.strip(), title, bool(trigger_spans), task)

    result = ParsedTask(
        title=title,
        is_valid=bool(title),
        original_text=transcript,
        confidence=confidence,
        confidence_reasons=tuple(reasons),
        **task,
    )
    logger.debug("Parsed %r -> %s (confidence %d)", transcript, title, confidence)
    return result


def command_examples() -> list[str]:
    return list(COMMAND_EXAMPLES)


def needs_review(task: ParsedTask, threshold: int) -> bool:
    """Invalid parses and anything scored below the threshold go to the edit form."""
    return not task.is_valid or task.confidence < threshold
