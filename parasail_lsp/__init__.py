"""ParaSail language server: document analysis engine and LSP front end."""

__version__ = "0.3.0"
