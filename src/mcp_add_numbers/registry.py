"""Explicit registration table for the tools this server exposes."""

from __future__ import annotations as _annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from mcp_add_numbers.addition import add
from mcp_add_numbers.utilities.logging import get_logger

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

logger = get_logger(__name__)


class ToolEntry(BaseModel):
    """Registration info for a single tool."""

    fn: Callable[..., Any] = Field(exclude=True)
    name: str = Field(description="Stable external name of the tool")
    title: str | None = Field(None, description="Human-readable title of the tool")
    description: str = Field(description="Description of what the tool does")
    annotations: ToolAnnotations | None = Field(None, description="Optional behaviour hints for clients")


class ToolRegistry:
    """Maps tool names to the callables that implement them.

    The table is filled once during start-up and then installed into an MCP
    server, so the set of exposed tools is visible in one place.
    """

    def __init__(self, warn_on_duplicate_tools: bool = True):
        self._tools: dict[str, ToolEntry] = {}
        self.warn_on_duplicate_tools = warn_on_duplicate_tools

    def add_tool(
        self,
        fn: Callable[..., Any],
        name: str | None = None,
        title: str | None = None,
        description: str | None = None,
        annotations: ToolAnnotations | None = None,
    ) -> ToolEntry:
        """Add a tool to the table, returning the entry stored under its name."""
        tool_name = name or fn.__name__
        if tool_name == "<lambda>":
            raise ValueError("You must provide a name for lambda functions")

        existing = self._tools.get(tool_name)
        if existing is not None:
            if self.warn_on_duplicate_tools:
                logger.warning(f"Tool already exists: {tool_name}")
            return existing

        entry = ToolEntry(
            fn=fn,
            name=tool_name,
            title=title,
            description=description or fn.__doc__ or "",
            annotations=annotations,
        )
        self._tools[tool_name] = entry
        logger.debug(f"Registered tool {tool_name}")
        return entry

    def get_tool(self, name: str) -> ToolEntry | None:
        return self._tools.get(name)

    def list_tools(self) -> list[ToolEntry]:
        return list(self._tools.values())

    def install(self, server: FastMCP) -> None:
        """Add every registered tool to ``server`` with structured output."""
        for entry in self._tools.values():
            server.add_tool(
                entry.fn,
                name=entry.name,
                title=entry.title,
                description=entry.description,
                annotations=entry.annotations,
                structured_output=True,
            )

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolEntry]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def default_registry(warn_on_duplicate_tools: bool = True) -> ToolRegistry:
    """Build the table of tools served by default."""
    registry = ToolRegistry(warn_on_duplicate_tools=warn_on_duplicate_tools)
    registry.add_tool(
        add,
        name="add_numbers",
        title="Add Numbers",
        description="Add two numbers together and return the result",
        annotations=ToolAnnotations(
            title="Add Numbers",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    return registry
