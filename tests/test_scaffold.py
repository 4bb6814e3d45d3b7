import pytest

from supremepower.agents import AgentCatalog, generate_agent, parse_agent_frontmatter, save_agent
from supremepower.agents.scaffold import (
    MAX_EXPERTISE,
    MAX_KEYWORDS,
    determine_complexity,
    extract_keywords,
    generate_agent_name,
)


def test_agent_name_is_kebab_case():
    assert generate_agent_name("React Performance Expert!") == "react-performance-expert"
    assert generate_agent_name("  API -- design  ") == "api-design"


def test_keywords_drop_stop_words_and_dedupe_technologies():
    assert extract_keywords("Senior React performance expert") == ["react", "performance"]
    assert extract_keywords("GraphQL API design") == ["graphql", "api", "design"]


def test_technology_names_are_added_when_not_already_present():
    # "Node.js" is split by the word pass, so the technology match is appended.
    assert extract_keywords("Node.js services") == ["node", "services", "Node.js"]


def test_keywords_are_capped():
    purpose = " ".join(f"topic{i}" for i in range(30))
    assert len(extract_keywords(purpose)) == MAX_KEYWORDS


def test_complexity_indicators():
    assert determine_complexity("Advanced caching") == "high"
    assert determine_complexity("Simple landing pages") == "low"
    assert determine_complexity("Landing pages") == "medium"


def test_generate_agent_draft():
    draft = generate_agent("GraphQL API design")
    assert draft.name == "graphql-api-design"
    assert draft.complexity_threshold == "medium"
    assert 0 < len(draft.expertise) <= MAX_EXPERTISE
    meta = parse_agent_frontmatter(draft.content)
    assert meta["name"] == "graphql-api-design"
    assert meta["activation_keywords"] == ["graphql", "api", "design"]
    assert "# Graphql Api Design Persona" in draft.content


def test_generate_agent_rejects_empty_purpose():
    with pytest.raises(ValueError):
        generate_agent("!!!")


def test_saved_agent_is_picked_up_as_custom(tmp_path):
    draft = generate_agent("Kubernetes deployment helper")
    path = save_agent(draft, tmp_path / "custom")
    assert path == tmp_path / "custom" / "kubernetes-deployment-helper.md"
    agent = AgentCatalog(tmp_path / "builtin", tmp_path / "custom").get("kubernetes-deployment-helper")
    assert agent.source == "custom"
    assert "kubernetes" in agent.keywords
