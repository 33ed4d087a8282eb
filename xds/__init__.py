"""XDS server - build-server folders mirroring client workspaces."""
