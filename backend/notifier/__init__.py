# backend/notifier/__init__.py
"""
Webhook notifier backend package.

This package contains:
- main: FastAPI application entrypoint
- webhook: Slack / Discord webhook dispatch
- notifications: application-facing notification facade
"""
