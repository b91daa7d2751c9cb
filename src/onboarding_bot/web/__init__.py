"""Onboarding Helper - Web app."""
