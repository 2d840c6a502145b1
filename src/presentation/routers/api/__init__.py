"""Versioned HTTP API (routers, middleware, error mapping)."""
