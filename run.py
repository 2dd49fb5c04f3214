"""Exporter entry point."""

from airgradient_exporter.runner import run

if __name__ == "__main__":
    run()
