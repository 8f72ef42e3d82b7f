"""Entry point for running as a module: python -m swipe_saver"""

from .app import main

if __name__ == "__main__":
    main()
