"""Host integration for terminal user interfaces."""
