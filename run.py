"""
Entry Point Script (Bootstrap)
==============================
Runs the command line interface straight from a source checkout.

Why is this file needed?
------------------------
It is located outside the 'src' package and adds 'src' to 'sys.path', so
'python run.py model.gfc' works without installing the package.

Usage:
    $ python run.py tests/data/example.gfc --degree 3
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from icgemio.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
