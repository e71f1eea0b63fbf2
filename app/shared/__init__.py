"""
Shared module package.

Cross-cutting concerns used by every layer above the domain:
error mapping, security headers, rate limiting and logging setup.
"""
