# =====================================================================
# File: assetplay_pkg/__main__.py
# Entrypoint for assetplay package (python -m assetplay_pkg)
# =====================================================================
from .core.app import main

if __name__ == "__main__":
    raise SystemExit(main())
