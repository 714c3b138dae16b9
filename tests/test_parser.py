from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from voice_todo.nlp.parser import command_examples, needs_review, parse

# Saturday
NOW = datetime(2024, 6, 15, 10, 0, tzinfo=UTC)


def test_parser_extracts_full_command():
    r = parse(
        "Add urgent work task: Finish presentation tomorrow at 2 PM description: include Q4 results",
        NOW,
    )
    assert r.title == "Finish presentation"
    assert r.priority == "high"
    assert r.category == "work"
    assert r.due_date == "2024-06-16"
    assert r.due_time == "14:00"
    assert r.description == "Include q4 results"
    assert r.is_valid
    assert r.confidence == 100
    assert r.confidence_reasons[:2] == ("Clear task title identified", "Clear task command detected")
    assert r.confidence_reasons[-1] == "Well-structured command"


def test_parser_is_pure():
    text = "Remind me to call mom next Friday at 6:15 pm note: ask about dinner"
    assert parse(text, NOW) == parse(text, NOW)


def test_parser_handles_minimal_text():
    r = parse("Buy milk", NOW)
    assert r.title == "Buy milk"
    assert r.category == "shopping"
    assert r.confidence == 35
    assert r.confidence_reasons == (
        "Clear task title identified",
        "Implied task (no explicit command)",
        "Category detected: shopping",
        "Very short input",
    )


def test_empty_input_is_invalid():
    for text in ("", "   "):
        r = parse(text, NOW)
        assert r.title == ""
        assert r.is_valid is False
        assert r.confidence == 0
        assert "Very short input" in r.confidence_reasons
        assert r.original_text == text


def test_confidence_rewards_structure():
    rich = parse("Add urgent task: Buy milk tomorrow at 2 PM", NOW)
    bare = parse("Buy milk", NOW)
    assert rich.confidence > bare.confidence


def test_high_priority_beats_low():
    r = parse("urgent call the plumber later", NOW)
    assert r.priority == "high"
    # keywords from the losing tier are stripped too
    assert r.title == "Call the plumber"


def test_qualified_priority_phrases():
    assert parse("low priority organize desk", NOW).priority == "low"
    assert parse("medium priority email team", NOW).priority == "medium"
    assert parse("water plants eventually", NOW).priority == "low"


def test_priority_phrase_removed_from_title():
    r = parse("high priority buy milk", NOW)
    assert r.priority == "high"
    assert "buy milk" in r.title.lower()
    assert "high priority" not in r.title.lower()


def test_from_now_is_not_urgent():
    r = parse("call mom 2 days from now", NOW)
    assert r.priority is None
    assert r.due_date == "2024-06-17"
    assert parse("call mom now", NOW).priority == "high"


def test_category_label_removed_content_keyword_kept():
    r = parse("work review presentation", NOW)
    assert r.category == "work"
    assert r.title == "Review presentation"

    r = parse("finance pay rent on the 1st", NOW)
    assert r.category == "finance"
    assert r.title == "Pay rent on the 1st"


def test_weekday_rolls_to_next_occurrence():
    assert parse("dentist Monday", NOW).due_date == "2024-06-17"
    # today is Saturday, so a full week ahead
    assert parse("dentist Saturday", NOW).due_date == "2024-06-22"


def test_next_and_this_weekday():
    assert parse("dentist next Monday", NOW).due_date == "2024-06-24"
    wednesday = datetime(2024, 6, 19, 12, 0, tzinfo=UTC)
    assert parse("standup this Monday", wednesday).due_date == "2024-06-17"
    assert parse("standup this Friday", wednesday).due_date == "2024-06-21"


def test_relative_dates():
    r = parse("return books in 3 days", NOW)
    assert r.due_date == "2024-06-18"
    assert r.title == "Return books"
    assert parse("renew lease in 2 months", NOW).due_date == "2024-08-15"
    assert parse("check bond 1 year from now", NOW).due_date == "2025-06-15"


def test_period_dates():
    assert parse("plan trip next week", NOW).due_date == "2024-06-17"
    assert parse("plan trip next month", NOW).due_date == "2024-07-01"
    assert parse("plan trip next year", NOW).due_date == "2025-01-01"
    assert parse("clean garage this month", NOW).due_date == "2024-06-15"


def test_month_day_rolls_forward_when_passed():
    assert parse("file taxes April 15th", NOW).due_date == "2025-04-15"
    assert parse("party June 15", NOW).due_date == "2024-06-15"
    assert parse("trip 3rd of august", NOW).due_date == "2024-08-03"


def test_month_day_with_year():
    assert parse("vacation July 4th 2026", NOW).due_date == "2026-07-04"
    assert parse("trip 3rd of august 2027", NOW).due_date == "2027-08-03"


def test_holidays():
    after_christmas = datetime(2024, 12, 26, 9, 0, tzinfo=UTC)
    assert parse("wrap presents by Christmas", after_christmas).due_date == "2025-12-25"
    assert parse("wrap presents by Christmas", NOW).due_date == "2024-12-25"
    assert parse("costume for halloween 2030", NOW).due_date == "2030-10-31"
    assert parse("fireworks on independence day", NOW).due_date == "2024-07-04"
    assert parse("resolutions for new year", NOW).due_date == "2025-01-01"


def test_explicit_dates():
    assert parse("pay rent 7/1/2024", NOW).due_date == "2024-07-01"
    assert parse("pay rent 7-1-2024", NOW).due_date == "2024-07-01"
    assert parse("renew passport 2024-09-03", NOW).due_date == "2024-09-03"


def test_impossible_date_is_left_in_title():
    r = parse("meet on February 30", NOW)
    assert r.due_date is None
    assert r.title == "Meet on February 30"


def test_twelve_hour_conversion():
    assert parse("call at 2:30 PM", NOW).due_time == "14:30"
    assert parse("wake up at 12 AM", NOW).due_time == "00:00"
    assert parse("lunch at 12 PM", NOW).due_time == "12:00"
    assert parse("appointment 10am", NOW).due_time == "10:00"
    assert parse("call at 14:30", NOW).due_time == "14:30"


def test_named_times():
    r = parse("take medicine tonight", NOW)
    assert r.due_date == "2024-06-15"
    assert r.due_time == "20:00"
    assert parse("lunch at noon", NOW).due_time == "12:00"
    assert parse("run in the morning", NOW).due_time == "09:00"
    assert parse("walk the dog evening", NOW).due_time == "18:00"


def test_relative_times_use_reference_clock():
    assert parse("stretch in 90 minutes", NOW).due_time == "11:30"
    late = datetime(2024, 6, 15, 23, 0)
    r = parse("check oven in 3 hours", late)
    assert r.due_time == "02:00"
    assert r.due_date is None


def test_invalid_time_is_ignored():
    r = parse("call at 13 pm", NOW)
    assert r.due_time is None


def test_aware_now_is_converted_to_utc():
    # 22:00 in Phoenix is already the 16th in UTC
    phoenix = datetime(2024, 6, 15, 22, 0, tzinfo=ZoneInfo("America/Phoenix"))
    assert parse("buy milk today", phoenix).due_date == "2024-06-16"


def test_description_markers():
    r = parse("buy milk note get whole milk not skim", NOW)
    assert r.title == "Buy milk"
    assert r.description == "Get whole milk not skim"

    r = parse("meeting with: the design team", NOW)
    assert r.title == "Meeting"
    assert r.description == "The design team"

    r = parse("lunch with Sarah", NOW)
    assert r.description is None
    assert r.title == "Lunch with Sarah"


def test_title_cleanup():
    assert parse("Remind me to call mom please", NOW).title == "Call mom"
    assert parse("buy    milk    tomorrow", NOW).title == "Buy milk"
    assert parse("add task: pick up laundry and", NOW).title == "Pick up laundry"


def test_all_caps_input_kept():
    r = parse("HIGH PRIORITY WORK MEETING TOMORROW", NOW)
    assert r.title == "MEETING"
    assert r.priority == "high"
    assert r.category == "work"
    assert r.due_date == "2024-06-16"


def test_only_keywords_is_invalid():
    r = parse("urgent important tomorrow", NOW)
    assert r.priority == "high"
    assert r.due_date == "2024-06-16"
    assert r.is_valid is False


def test_command_examples_all_parse():
    examples = command_examples()
    assert len(examples) == 12
    for text in examples:
        assert parse(text, NOW).is_valid, text


def test_needs_review():
    assert needs_review(parse("", NOW), 75)
    assert needs_review(parse("Buy milk", NOW), 75)
    assert not needs_review(parse("Add urgent task: Buy milk tomorrow at 2 PM", NOW), 75)


def test_task_trigger_only_spans_qualifier_words():
    r = parse("Add milk and eggs task", NOW)
    assert r.is_valid
    assert r.title == "Add milk and eggs task"
    assert "Implied task (no explicit command)" in r.confidence_reasons

    assert parse("Add milk to my task list", NOW).title == "Add milk to my task list"
    assert parse("new deadline for the task review", NOW).title == "New deadline for the task review"

    r = parse("Create low priority personal task: water plants", NOW)
    assert r.title == "Water plants"
    assert "Clear task command detected" in r.confidence_reasons


def test_short_input_penalty_counts_inner_spaces():
    r = parse("Buy     milk", NOW)
    assert r.title == "Buy milk"
    assert r.confidence == 45
    assert "Very short input" not in r.confidence_reasons


def test_february_29_waits_for_leap_year():
    assert parse("party February 29", datetime(2023, 6, 1, tzinfo=UTC)).due_date == "2024-02-29"
    assert parse("party February 29", datetime(2024, 3, 1, tzinfo=UTC)).due_date == "2028-02-29"
    assert parse("party February 29", datetime(2024, 2, 1, tzinfo=UTC)).due_date == "2024-02-29"
