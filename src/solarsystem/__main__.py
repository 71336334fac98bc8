"""Command-line entry point: ``python -m solarsystem``."""
from solarsystem.main import main

if __name__ == "__main__":
    main()
