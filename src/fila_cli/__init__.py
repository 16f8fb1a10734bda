"""Client and CLI for the Fila de Aposentadoria REST API."""

__version__ = "0.1.0"
