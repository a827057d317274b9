# =============================================================================
# agent/__init__.py
# =============================================================================
# The Google ADK chat client.  It spawns the tool server, lets the LLM pick
# tools, and relays their text to the user.  No tool semantics live here.
# =============================================================================
