"""
Websets MCP server package.

This package exposes the Exa Websets REST API as schema-validated tools that
always answer with a uniform outcome envelope. See DESIGN.md for full details.
"""

__all__ = ["config"]
