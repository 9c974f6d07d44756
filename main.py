# PDFBookGen/main.py

import sys
import os

# This line ensures that Python finds the pdfbookgen package from a checkout
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from pdfbookgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
