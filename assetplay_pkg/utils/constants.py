# =====================================================================
# File: assetplay_pkg/utils/constants.py
# ANSI colors and fixed console text
# =====================================================================
from __future__ import annotations

RED    = "\033[0;31m"
GREEN  = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE   = "\033[0;34m"
NC     = "\033[0m"

LOG_PREFIX = "play1_execution_"
TIMESTAMP_FMT = "%Y%m%d_%H%M%S"
DATE_STAMP_LEN = 8
LATEST_REPORTS = 5

NIST_CONTROLS = [
    ("ID.AM-1", "Physical devices inventoried"),
    ("ID.AM-2", "Software platforms inventoried"),
    ("ID.AM-3", "Communication flows mapped"),
    ("ID.AM-4", "External systems catalogued"),
    ("ID.AM-5", "Resources prioritized by criticality"),
]

NEXT_STEPS = [
    "Review inventory reports in: {report_dir}",
    "Generate compliance report: python3 nist_csf_report_generator.py",
    "Proceed to Play 2: Vulnerability Assessment",
]

TROUBLESHOOTING = [
    "Check the log file for detailed errors",
    "Verify host connectivity: ansible all -m ping",
    "Test with check mode: assetplay --check",
    "Run with verbose mode: assetplay -vvv",
]
