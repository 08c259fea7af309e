"""Query layer."""

from .resources import ResourcePage, ResourceQueries

__all__ = ["ResourcePage", "ResourceQueries"]
