"""Infrastructure layer — window-manager bindings behind the display contract."""
