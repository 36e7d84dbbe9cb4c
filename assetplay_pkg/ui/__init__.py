# =====================================================================
# File: ui/__init__.py
# Description: Console output blocks for assetplay
# =====================================================================

"""
Fixed-format console output: banner, execution summary,
next steps and troubleshooting hints.
"""
