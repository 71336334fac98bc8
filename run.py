"""
Entry Point Script (Bootstrap)
==============================
Starting point of the application for development.

It lives outside the 'src' package and puts 'src' on sys.path so that
'from solarsystem...' imports resolve without installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from solarsystem.main import main

if __name__ == "__main__":
    main()
