"""Run the BookTable API server with ``python -m booktable``."""

from booktable.server import run_server

if __name__ == "__main__":
    run_server()
