"""Package entry point for ``python -m mux_client``."""

from mux_client.cli import main

if __name__ == "__main__":
    main()
