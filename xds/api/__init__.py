"""XDS API layer: configuration, folders, SDKs and the HTTP binding."""
