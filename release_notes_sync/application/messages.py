"""
Notification text posted after the release notes have been updated.
Kept in the application layer next to the flow that sends it, independent of
the webhook transport.
"""

UPDATE_NOTIFICATION_TEMPLATE = """🔄 New SDK changelog update: {version}
Release notes have been updated in the docs portal.
Please review for additional documentation updates."""


def update_notification(version: str) -> str:
    return UPDATE_NOTIFICATION_TEMPLATE.format(version=version)
