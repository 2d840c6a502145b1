"""HTTP surface of the dashboard.

Routers resolve the caller from the bearer token, ask the access policy,
hand the request to an application handler and turn its Result into a
response. Query and command semantics live in src.application.

- routers/system.py: root, health, config
- routers/api/v1/: collections, navigation, users
- routers/api/middleware/: trace id, caller identity, permission guards
"""
