# =============================================================================
# agent/events.py  -  Turning ADK tool events into console lines
# =============================================================================
#
# The runner streams events whose parts carry either a function_call
# (tool name + args the model chose) or a function_response (what the MCP
# tool returned).  For MCP tools the response is the CallToolResult dumped
# to a dict:
#
#   {"content": [{"type": "text", "text": "..."}], "isError": false}
#
# A tool that raised comes back with "isError": true and the exception
# message as its text.  ADK itself may also report {"error": "..."} when
# it could not run the tool at all.
# =============================================================================

from typing import Any, Mapping, Optional, Tuple

PREVIEW_LIMIT = 400


def format_call(name: str, args: Optional[Mapping[str, Any]]) -> str:
    """`get_forecast(latitude=40.7128, longitude=-74.006)`"""
    rendered = ", ".join(f"{key}={value!r}" for key, value in (args or {}).items())
    return f"{name}({rendered})"


def tool_result_text(response: Optional[Mapping[str, Any]]) -> Tuple[str, bool]:
    """Text of a tool response and whether it is an error."""
    if not response:
        return "", False

    if "error" in response:
        return str(response["error"]), True

    content = response.get("content")
    if isinstance(content, list):
        texts = [item.get("text", "") for item in content if isinstance(item, Mapping) and item.get("type") == "text"]
        return "\n".join(texts), bool(response.get("isError"))

    if "result" in response:
        return str(response["result"]), False

    return str(dict(response)), False


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"
