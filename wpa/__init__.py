"""
wpa - WP Automator command-line tool.

Runs lifecycle hooks from composer.json scripts and writes default config.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
