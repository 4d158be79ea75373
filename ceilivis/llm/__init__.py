"""Natural-language dance parsing through the Anthropic API."""
