"""Integrations with third-party frameworks. Import submodules directly."""
