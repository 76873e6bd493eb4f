"""
Run the basic `idioma` demo with `python -m idioma`.

The demo exits with code `1` after its `error` message.
"""

from .demo import basic


def run() -> None:
    """Run `demo.basic()`."""
    basic()


if __name__ == "__main__":
    run()
