"""Core orchestration: invocation policy, slash commands, prompt rendering and tool policy."""
