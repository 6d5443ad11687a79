"""
QBayes Project CLI Entry Point.
Use: python main.py collapse "0.2, 0.5, 0.3"
"""
import sys
from pathlib import Path

# --- Path Setup to ensure qbayes modules can be imported ---
# Add project root to sys.path (needed if main.py is run directly)
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from qbayes.cli import main

if __name__ == "__main__":
    sys.exit(main())
