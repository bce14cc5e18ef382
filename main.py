# =============================================================================
# main.py  —  Entry Point for the Translator Assistant demo
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (AGENT_MODEL, OPENROUTER_API_KEY, AZURE_OPENAI_* ...)
#   2. Creates the ADK agent (agent/translator_agent.py), which spawns the
#      tool server (tools/mcp_server.py) over stdio
#   3. Reads questions from the terminal and streams the agent's answers,
#      printing each tool call as it happens
#
# The tool server itself does not need this file.  MCP clients other than
# this demo start it directly with `python -m tools.mcp_server`.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Must run BEFORE creating the agent: LiteLlm reads its API key from the
# environment when it initializes, and the spawned server inherits it too.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.translator_agent import create_agent

APP_NAME = "translator_assistant"
USER_ID = "demo_user"


async def run_agent():
    """Run the translator assistant interactively until the user quits."""
    print("=" * 70)
    print("  TRANSLATOR ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    # =========================================================================
    # Runner + Session
    # =========================================================================
    # InMemorySessionService keeps the conversation in RAM; fine for a demo.
    # The tools themselves are stateless, only the agent remembers turns.
    # =========================================================================
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask for a translation, e.g. 'Translate \"good morning\" to Japanese'")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # Events arrive as the agent works: text parts, tool calls, results.
        # We print tool calls live and keep the last text part as the answer.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
