"""
Shared pytest configuration.

Loads the ForexDesk plugin so every test can request the
``expect`` and ``document_db`` fixtures.
"""

pytest_plugins = ["forexdesk.testing.plugin"]
