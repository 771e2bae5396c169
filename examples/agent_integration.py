#!/usr/bin/env python3
"""Example showing how an AI agent drives the navigator through tool calls."""

import json
import os
import tempfile

from file_navigator import AgentNavigator, NavigatorError


class SimpleAIAgent:
    """A scripted agent that issues navigator tool calls."""

    def __init__(self):
        self.navigator = AgentNavigator()

    def run_tool(self, tool_name: str, arguments: dict) -> str:
        """Run a tool call and turn failures into text the agent can read."""
        try:
            return self.navigator.call(tool_name, arguments)
        except NavigatorError as e:
            return f"Error ({e.kind.value}): {e}"

    def get_operation_history(self) -> str:
        history = [
            {"operation": entry["operation"], "details": entry["details"]}
            for entry in self.navigator.get_operation_log()
        ]
        return json.dumps(history, indent=2, default=str)


def demonstrate_agent_usage():
    print("=== AI Agent File Navigation Demo ===\n")

    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".txt", delete=False, encoding="utf-8"
    ) as tmp:
        for i in range(1, 5001):
            marker = "TODO" if i % 750 == 0 else "done"
            tmp.write(f"task {i}: {marker}\n")
        path = tmp.name

    agent = SimpleAIAgent()

    try:
        print("1. Looking at the top of the file...")
        print(agent.run_tool("go_to_line", {"filename": path, "line": 1, "screen_height": 5}))

        print("\n2. Searching for open tasks...")
        print(agent.run_tool("find", {"filename": path, "pattern": "todo"}))

        print("\n3. Cycling through matches...")
        print(agent.run_tool("next_match", {"filename": path}))
        print(agent.run_tool("prev_match", {"filename": path}))

        print("\n4. Paging around...")
        print(agent.run_tool("page_down", {"filename": path}))
        print(agent.run_tool("page_up", {"filename": path}))

        print("\n5. Handling mistakes...")
        print(agent.run_tool("find", {"filename": path, "pattern": "(", "is_regex": True}))
        print(agent.run_tool("page_down", {"filename": "nonexistent.txt"}))
        print(agent.run_tool("scroll", {"filename": path}))

        print("\n6. Operation history...")
        print(agent.get_operation_history())

        stats = agent.navigator.monitor.get_stats("find")
        print(f"\nfind: {stats.count} calls, {stats.failures} failed")
    finally:
        os.unlink(path)

    print("\n=== Demo completed successfully! ===")


if __name__ == "__main__":
    demonstrate_agent_usage()
