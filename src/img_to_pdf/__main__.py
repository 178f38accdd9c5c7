"""
Main entry point for running the converter as a module.

Usage: python -m img_to_pdf [arguments]
"""

import sys
from pathlib import Path

# Allow running straight from a source checkout without installing
if __name__ == "__main__":
    current_dir = Path(__file__).parent.parent
    if str(current_dir) not in sys.path:
        sys.path.insert(0, str(current_dir))

    from img_to_pdf.main import main
    main()
