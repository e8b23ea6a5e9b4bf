# main.py
"""
Main entry point for the pan/zoom camera demo.
"""
from panzoom.app import main

if __name__ == '__main__':
    raise SystemExit(main())
