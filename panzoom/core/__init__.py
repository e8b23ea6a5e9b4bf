"""Gesture tracking, resolution and camera clamping."""
__all__ = ["camera", "camera_clamp", "config", "contacts", "controller", "gestures", "input_events"]
