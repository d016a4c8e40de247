"""
Run with: python -m keypadcalc
"""
import sys

from keypadcalc.main import main

sys.exit(main())
