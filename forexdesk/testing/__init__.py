"""
Test support for ForexDesk and the services that depend on it.

- ``expect``: assertion helper with registrable matchers.
- ``MockDocumentDatabase``: stand-in for the document database driver.
- ``plugin``: pytest fixtures exposing both.
"""

from forexdesk.testing.document_db import MockDocumentDatabase, MockModel
from forexdesk.testing.expect import expect, extend

__all__ = ["MockDocumentDatabase", "MockModel", "expect", "extend"]
