"""Riichi mahjong game model: tiles, hands, completion patterns, table layout and an event log."""

__version__ = "0.1.0"