"""PathMap folders: client and server share a filesystem view."""
