"""chatrelay: chat backend that relays messages to a hosted LLM and stores history."""

__version__ = "0.1.0"
