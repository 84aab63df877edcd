"""Entry point: python -m timebyzones."""

from timebyzones.cli import main

if __name__ == "__main__":
    main()
