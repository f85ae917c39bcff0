from task_engine.entities import (
    extract_action_verbs,
    extract_dates,
    extract_entities,
    extract_locations,
    extract_people,
)


def test_dates_lowercased_and_deduplicated():
    dates = extract_dates("Plan launch next Monday, review 12/25 and Jan 5, 2025")
    assert dates == ("monday", "12/25", "jan 5, 2025", "next monday")
    assert extract_dates("Today or today or TODAY") == ("today",)


def test_dates_numeric_and_relative_phrases():
    dates = extract_dates("Due 3-15-2026, follow up tomorrow or this month")
    assert "3-15-2026" in dates
    assert "tomorrow" in dates
    assert "this month" in dates


def test_people_after_cue_word():
    assert extract_people("Please contact John Smith about the contract") == ("John Smith",)


def test_people_handles():
    assert extract_people("Ping @devops and notify Maria") == ("Maria", "devops")


def test_people_cue_is_case_sensitive():
    assert extract_people("Contact support later") == ()


def test_locations_capitalized_phrase():
    assert extract_locations("Deliver boxes to Main Street") == ("Main Street",)


def test_locations_room_code():
    assert extract_locations("Bring the projector to room 4B") == ("4B",)
    assert extract_locations("Conduct safety inspection at Site B") == ("Site", "B")


def test_action_verbs_whole_words():
    verbs = extract_action_verbs("Review and approve the budget, then email Finance. Reviewing later.")
    assert verbs == ("review", "approve", "email")


def test_repeated_calls_see_every_match():
    text = "Meet with Anna at Dock Nine on Friday"
    first = extract_entities(text)
    second = extract_entities(text)
    assert first == second
    assert first.people == ("Anna",)
    assert first.dates == ("friday",)


def test_empty_text_has_no_entities():
    entities = extract_entities("")
    assert entities.dates == ()
    assert entities.people == ()
    assert entities.locations == ()
    assert entities.action_verbs == ()


def test_patterns_match_ascii_only():
    assert extract_dates("due ٣/٤ and 12/25") == ("12/25",)
    assert extract_dates("Decembe\u212a 3") == ()
    assert extract_people("ping @José") == ("Jos",)
