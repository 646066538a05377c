"""MCP adapter: tools and resources over TimeService.

Optional extra: requires ``pip install timedate[mcp]``.
"""
