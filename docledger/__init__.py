"""docledger - quotation, invoice and receipt backend for a small service company."""

__version__ = "0.1.0"
