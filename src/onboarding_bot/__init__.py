"""
EOTO Onboarding Helper - chat bot for new teammates.

Packages:
- onboarding_bot: Core service (config, storage, platform client, web app, CLI)
- onboarding: Checklist flow and email signature generator
"""

__version__ = "1.0.0"
