"""Message bundles used to render diagnostics."""

from .catalog import MessageCatalog, default_catalog, load_catalog

__all__ = ["MessageCatalog", "default_catalog", "load_catalog"]
