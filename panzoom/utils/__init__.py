"""
Utilities package marker.

Settings, logging and the small pub/sub bus live here so the core modules
stay free of host plumbing.
"""
__all__ = ["camera_types", "event_bus", "logging_setup", "settings"]
