"""Storybook export service: page validation, layout and PDF export."""

__version__ = "0.1.0"
