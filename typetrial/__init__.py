"""Typing-speed assessment service."""
