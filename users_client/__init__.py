"""users-client - Asynchronous typed client for a create-user HTTP endpoint."""

__version__ = "0.1.0"
