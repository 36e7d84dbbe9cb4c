# =====================================================================
# File: core/__init__.py
# Description: Core package initializer for assetplay
# =====================================================================

"""
Core components of assetplay:
  - Argument parser and run options
  - Configuration (settings file, environment, defaults)
  - Prerequisite checks
  - Inventory validation
  - Connectivity probe
  - Runner (ansible command builders, subprocess executor)
  - Playbook execution
  - Report summary and retention cleanup
  - Main App controller
"""
