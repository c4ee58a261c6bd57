"""Emacs and vi style key-event parsing and keybindings for line editors."""

__version__ = "0.1.0"