from supremepower.orchestration import (
    Agent,
    ConditionalRule,
    ContextHints,
    ScoringPolicy,
    matches_keywords,
    score_and_select_agents,
)
from supremepower.orchestration.scoring import condition_fires

SECURITY = Agent(name="security-expert", keywords=("security", "auth", "encryption"))
FRONTEND = Agent(name="frontend-expert", keywords=("react", "css"))


def test_matches_keywords_is_case_insensitive_substring():
    assert matches_keywords("Authentication system", ["auth"]) is True
    assert matches_keywords("Authentication system", ["database"]) is False
    assert matches_keywords("anything", []) is False
    assert matches_keywords("anything", None) is False


def test_two_direct_hints_activate():
    hints = ContextHints(direct=("security expertise", "authentication flows"))
    outcome = score_and_select_agents(hints, [], "whatever", [SECURITY])
    assert outcome.scores == {"security-expert": 20}
    assert outcome.activated_agents == ("security-expert",)


def test_single_subtle_hint_stays_below_threshold():
    hints = ContextHints(subtle=("the encryption scheme",))
    outcome = score_and_select_agents(hints, [], "whatever", [SECURITY])
    assert outcome.scores["security-expert"] == 5
    assert outcome.activated_agents == ()


def test_conditional_fires_on_message_word():
    rule = ConditionalRule("Working with React components", ("frontend-expert",))
    outcome = score_and_select_agents(ContextHints(), [rule], "Refactor the React components", [FRONTEND])
    assert outcome.scores["frontend-expert"] == 20
    assert outcome.activated_agents == ("frontend-expert",)


def test_combined_points_accumulate():
    hints = ContextHints(direct=("React expertise",), subtle=("react hooks",))
    rule = ConditionalRule("react", ("frontend-expert",))
    outcome = score_and_select_agents(hints, [rule], "a react app", [FRONTEND])
    assert outcome.scores["frontend-expert"] == 35


def test_threshold_is_strictly_greater_than():
    hints = ContextHints(direct=("security expertise",))
    outcome = score_and_select_agents(hints, [], "", [SECURITY], ScoringPolicy(threshold=10))
    assert outcome.scores["security-expert"] == 10
    assert outcome.activated_agents == ()


def test_short_condition_tokens_never_fire():
    assert condition_fires("UI", "ui work") is False
    assert condition_fires("an ui", "an ui") is False
    assert condition_fires("css ui", "css tweaks") is True


def test_unknown_rule_agents_are_ignored():
    rule = ConditionalRule("react", ("ghost-agent", "frontend-expert"))
    outcome = score_and_select_agents(ContextHints(), [rule], "react", [FRONTEND])
    assert outcome.scores == {"frontend-expert": 20}


def test_activation_follows_input_order_not_score():
    hints = ContextHints(direct=("security expertise", "react expertise", "auth expertise"))
    outcome = score_and_select_agents(hints, [], "", [FRONTEND, SECURITY])
    assert outcome.scores == {"frontend-expert": 10, "security-expert": 20}
    assert outcome.activated_agents == ("frontend-expert", "security-expert")


def test_every_agent_gets_a_score():
    outcome = score_and_select_agents(ContextHints(), [], "", [SECURITY, FRONTEND])
    assert outcome.scores == {"security-expert": 0, "frontend-expert": 0}


def test_custom_policy_points():
    policy = ScoringPolicy(direct_points=3, subtle_points=1, conditional_points=7, threshold=2)
    hints = ContextHints(direct=("auth expertise",), subtle=("security",))
    outcome = score_and_select_agents(hints, [], "", [SECURITY], policy)
    assert outcome.scores["security-expert"] == 4
    assert outcome.activated_agents == ("security-expert",)
