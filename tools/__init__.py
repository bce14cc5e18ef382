# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP server that publishes the tool catalog.
#
# ARCHITECTURAL ROLE:
#   tools/ is the wire layer between MCP clients and core/.  It:
#     1. Declares each tool under its public name with typed parameters
#     2. Logs every request and response
#     3. Hands the call to core.registry.ToolRegistry
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT compute anything (that's in core/)
#   - They do NOT talk to the language model directly (core/completion.py)
#   - They do NOT know about the demo agent in agent/
# =============================================================================
