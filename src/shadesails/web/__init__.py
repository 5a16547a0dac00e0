"""REST API for shade sail quoting."""

from shadesails.web.app import app, create_app

__all__ = ["app", "create_app"]
