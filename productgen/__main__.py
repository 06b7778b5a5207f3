"""Allow running as ``python -m productgen``."""

from productgen.main import run

if __name__ == "__main__":
    run()
