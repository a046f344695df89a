# ▶️ payrate/__main__.py
"""▶️ `python -m payrate hourly 20`."""

from payrate.cli.main import run

if __name__ == "__main__":
    run()
