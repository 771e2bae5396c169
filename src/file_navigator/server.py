"""MCP server exposing the file navigator tools over stdio.

Register with an MCP client, for example::

    {
      "mcpServers": {
        "file-navigator": {"command": "file-navigator"}
      }
    }

Settings are read from ``FILE_NAVIGATOR_*`` environment variables, see
:class:`file_navigator.config.NavigatorConfig`.
"""
import logging
import sys
from typing import Callable, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .agent.interface import AgentNavigator
from .config import NavigatorConfig
from .core.errors import NavigatorError

logger = logging.getLogger(__name__)

SERVER_NAME = "file-navigator"


def _call(command: Callable[[], str]) -> str:
    try:
        return command()
    except NavigatorError as e:
        raise ToolError(f"[{e.kind.value}] {e}") from e


def create_server(
    agent: Optional[AgentNavigator] = None, name: str = SERVER_NAME
) -> FastMCP:
    """Build an MCP server whose tools share one navigator session table.

    Args:
        agent: Agent navigator to dispatch to (a new one by default)
        name: Server name announced to clients

    Returns:
        Configured FastMCP server
    """
    agent = agent or AgentNavigator()
    mcp = FastMCP(name)

    @mcp.tool()
    def go_to_line(
        filename: str = Field(description="Path to the file to navigate"),
        line: int = Field(description="Line number to navigate to (1-based)"),
        screen_height: Optional[int] = Field(
            default=None,
            description="Number of lines to display (default: 30)",
        ),
    ) -> str:
        """Navigate to a specific line number in the file."""
        return _call(lambda: agent.go_to_line(filename, line, screen_height))

    @mcp.tool()
    def find(
        filename: str = Field(description="Path to the file to search"),
        pattern: str = Field(description="String or regex pattern to search for"),
        is_regex: bool = Field(
            default=False,
            description="Whether to treat pattern as regex (default: false)",
        ),
    ) -> str:
        """Search for a string or regex pattern in the file."""
        return _call(lambda: agent.find(filename, pattern, is_regex))

    @mcp.tool()
    def next_match(filename: str = Field(description="Path to the file")) -> str:
        """Navigate to the next search match."""
        return _call(lambda: agent.next_match(filename))

    @mcp.tool()
    def prev_match(filename: str = Field(description="Path to the file")) -> str:
        """Navigate to the previous search match."""
        return _call(lambda: agent.prev_match(filename))

    @mcp.tool()
    def page_up(filename: str = Field(description="Path to the file")) -> str:
        """Move up one screen height."""
        return _call(lambda: agent.page_up(filename))

    @mcp.tool()
    def page_down(filename: str = Field(description="Path to the file")) -> str:
        """Move down one screen height."""
        return _call(lambda: agent.page_down(filename))

    return mcp


def main():
    """Run the navigator server on stdio."""
    config = NavigatorConfig.from_env()

    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = create_server(AgentNavigator(config=config))
    logger.info("File Navigator MCP server running on stdio")
    server.run()


if __name__ == "__main__":
    main()
