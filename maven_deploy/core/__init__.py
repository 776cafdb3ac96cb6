"""Core domain: models, validators, command building and use cases."""
