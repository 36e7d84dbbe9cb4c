# =====================================================================
# File: utils/__init__.py
# Description: Utilities package initializer for assetplay
# =====================================================================

"""
Utility helpers for assetplay:
  - Logging utilities
  - File discovery and age matching
  - Console colors and fixed text
  - Miscellaneous common helpers
"""
