"""Shared utilities for the Space Explorer dashboard."""

# Numeric helpers
from utils.numbers import safe_number, round_half_away

# Display formatting
from utils.formatting import format_average, format_count, format_diameter, format_distance

# HTTP session management
from utils.http import SessionManager

# Configuration
from utils.config import AppConfig, Config

__all__ = [
    # numbers
    "safe_number",
    "round_half_away",
    # formatting
    "format_average",
    "format_count",
    "format_diameter",
    "format_distance",
    # http
    "SessionManager",
    # config
    "AppConfig",
    "Config",
]
