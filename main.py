# =============================================================================
# main.py  -  Entry point for the interactive assistant
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads Settings (core/config.py) and builds the ADK agent with the
#      configured AGENT_MODEL; the agent spawns the FastMCP tool server
#   2. Opens an in-memory session
#   3. For each line you type, prints every tool call with its arguments,
#      every tool result (or the error text the server returned), then the
#      agent's final answer
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Provider keys (OPENROUTER_API_KEY, ...) must be in the environment before
# LiteLlm is constructed.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.events import format_call, preview, tool_result_text
from agent.weather_agent import create_agent
from core.config import Settings, get_settings

APP_NAME = "weather_logistics"
USER_ID = "demo_user"
EXIT_COMMANDS = ("quit", "exit", "q")


def print_part(part) -> str:
    """Print a tool call or tool result; return the part's text, if any."""
    if getattr(part, "function_call", None):
        call = part.function_call
        print(f"  🔧 {format_call(call.name, call.args)}")

    if getattr(part, "function_response", None):
        result = part.function_response
        text, is_error = tool_result_text(result.response)
        label = "❌ error from" if is_error else "📦 result from"
        print(f"  {label} {result.name}:")
        for line in preview(text).splitlines() or [""]:
            print(f"     {line}")

    return getattr(part, "text", None) or ""


async def ask(runner: Runner, session_id: str, question: str) -> str:
    message = types.Content(role="user", parts=[types.Part(text=question)])

    final_response = ""
    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            text = print_part(part)
            if text and event.is_final_response():
                final_response = text
    return final_response


async def run_agent(settings: Settings):
    """Run the assistant in a read-eval-print loop until the user quits."""
    print("=" * 70)
    print("  WEATHER & LOGISTICS ASSISTANT")
    print(f"  model: {settings.agent_model}")
    print(f"  weather: {settings.weather_api_base_url}")
    print(f"  logistics: {settings.logistics_api_base_url}")
    print("=" * 70)
    agent = create_agent(settings)

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("💬 Ask about weather alerts, forecasts, transports or liquidations.")
    print("   (Type 'quit' to exit)")

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n👋 Goodbye!")
            break

        if user_input.lower() in EXIT_COMMANDS:
            print("👋 Goodbye!")
            break

        if not user_input:
            continue

        print("-" * 70)
        final_response = await ask(runner, session.id, user_input)
        print("-" * 70)

        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No final answer; see the tool results above.")


if __name__ == "__main__":
    asyncio.run(run_agent(get_settings()))
