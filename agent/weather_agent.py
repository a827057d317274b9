# =============================================================================
# agent/weather_agent.py  -  Google ADK agent wired to the tool server
# =============================================================================
#
# The agent owns no tool logic.  It has:
#   - a system prompt (agent/prompt.py)
#   - one MCPToolset that spawns tools/mcp_server.py over stdio
#   - a LiteLlm model (any provider LiteLLM understands, default via OpenRouter)
#
#   ┌────────────────────────┐   stdio    ┌──────────────────────────┐
#   │  ADK Agent (LiteLlm)   │ ─────────▶ │  FastMCP "weather" server │
#   └────────────────────────┘            │  (tools/mcp_server.py)    │
#                                         └──────────────────────────┘
#                                                      │ httpx
#                                          api.weather.gov / logistics
# =============================================================================

import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool.mcp_session_manager import StdioConnectionParams
from google.adk.tools.mcp_tool.mcp_toolset import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_assistant_prompt
from core.config import Settings, get_settings


def server_parameters() -> StdioServerParameters:
    """Command that starts the tool server with the current interpreter."""
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create the assistant agent.

    The LiteLlm model string comes from AGENT_MODEL; LiteLLM reads the
    matching provider key (e.g. OPENROUTER_API_KEY) from the environment.
    """
    settings = settings or get_settings()

    mcp_tools = MCPToolset(
        connection_params=StdioConnectionParams(server_params=server_parameters()),
    )

    return Agent(
        name="weather_logistics_assistant",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_assistant_prompt(),
        tools=[mcp_tools],
    )
