"""Menu command handlers. Each handler returns (ctx, should_continue)."""
