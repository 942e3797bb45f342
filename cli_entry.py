"""Entry point for PyInstaller EXE build of the demo CLI.

Usage (development)::

    python cli_entry.py [args]

Usage (build)::

    pyinstaller --onefile --name result-match --console cli_entry.py
"""
from result_match.cli import main

if __name__ == "__main__":
    main()
