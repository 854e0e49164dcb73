"""
Core utilities shared across the ski station API.

This package hosts configuration helpers (environment variables, database
URL, feature flags) and cross-cutting concerns such as logging setup.
Routers and services depend on these primitives instead of reading
os.environ directly.
"""
