"""Build job completion requests with JSON variables and send them through a gateway."""

__version__ = "0.1.0"
__all__ = ["complete_job", "variables"]