"""Core services: channel-independent building blocks for the use cases."""
