from supremepower.orchestration.conditionals import (
    extract_bullet_rules,
    extract_conditional_blocks,
    extract_inline_rules,
    split_agents,
)
from supremepower.orchestration.models import ConditionalRule


def test_bullet_then_inline_order():
    text = "- auth → security-engineer\nIf working with: database → db-specialist"
    assert extract_conditional_blocks(text) == (
        ConditionalRule("auth", ("security-engineer",)),
        ConditionalRule("database", ("db-specialist",)),
    )


def test_multiple_agents_split_on_plus():
    text = "- database schema → backend-architect + database-specialist"
    (rule,) = extract_bullet_rules(text)
    assert rule.condition == "database schema"
    assert rule.agents == ("backend-architect", "database-specialist")


def test_split_agents_drops_empty_pieces():
    assert split_agents(" a + + b ") == ("a", "b")


def test_inline_header_followed_by_bullets_is_left_to_bullet_pattern():
    text = "If working with:\n - authentication → security-engineer"
    assert extract_inline_rules(text) == []
    assert extract_conditional_blocks(text) == (ConditionalRule("authentication", ("security-engineer",)),)


def test_inline_trigger_is_case_insensitive_and_accepts_when():
    text = "WHEN WORKING WITH React components → frontend-architect"
    assert extract_inline_rules(text) == [ConditionalRule("React components", ("frontend-architect",))]


def test_mixed_content_keeps_appearance_order_per_family():
    text = (
        "Some intro.\n"
        "- database → database-specialist\n"
        "Prose with a hyphen-word and no arrow.\n"
        "- authentication → security-engineer\n"
    )
    rules = extract_conditional_blocks(text)
    assert [r.condition for r in rules] == ["database", "authentication"]


def test_condition_in_both_notations_yields_two_rules():
    text = "- auth → security-engineer\nWhen working with: auth → security-engineer"
    assert len(extract_conditional_blocks(text)) == 2


def test_non_string_or_empty_content():
    assert extract_conditional_blocks(None) == ()
    assert extract_conditional_blocks("") == ()
    assert extract_conditional_blocks("no rules here") == ()
