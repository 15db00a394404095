#!/usr/bin/env python3
"""undoline counter demo.

Usage:
    python main.py

Controls:
    + / -: Increment / decrement the counter
    Ctrl-Z: Undo
    Ctrl-Y: Redo
    Ctrl-R: Reset history to the starting value
    Ctrl-Q: Quit
"""

from undoline.textual_app import CounterApp


def main():
    """Entry point for the counter demo."""
    app = CounterApp()
    app.run()

    print("\nGoodbye!")


if __name__ == "__main__":
    main()
