# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.  Each tool:
#   1. Declares typed, described parameters (the agent reads them)
#   2. Opens a per-call connection from its provider
#   3. Calls a core/ coroutine and returns its text
#   4. Logs the request and the response to stderr
# =============================================================================
