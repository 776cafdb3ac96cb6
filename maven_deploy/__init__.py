"""Maven deploy — validated, injection-safe ``mvn deploy`` for release pipelines."""

__version__ = "2.0.0"
