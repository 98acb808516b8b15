"""HTTP gateway, authentication and error types."""
