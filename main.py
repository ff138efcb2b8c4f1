"""
Model Code Generator

Entry point for the model generator script.
"""

import sys

from model_codegen.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
