from .activation import ActivationReport, ActivationService, ScaffoldReport, keyword_fallback
from .catalog import AgentCatalog, load_agent_definitions, parse_agent_frontmatter
from .persona import format_personas, to_title_case
from .scaffold import AgentDraft, generate_agent, save_agent

__all__ = [
    "ActivationReport",
    "ActivationService",
    "AgentCatalog",
    "AgentDraft",
    "ScaffoldReport",
    "format_personas",
    "generate_agent",
    "keyword_fallback",
    "load_agent_definitions",
    "parse_agent_frontmatter",
    "save_agent",
    "to_title_case",
]
