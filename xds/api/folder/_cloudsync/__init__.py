"""CloudSync folders: transfer-based sync agent (wire data only, no backend)."""
