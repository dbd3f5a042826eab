"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Trip field extraction (rule-based)
- Diagnostics sinks (null, logging, recording)
"""
