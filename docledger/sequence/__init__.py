"""Period-scoped document numbering (QT/INV/REC + Buddhist year + month)."""
