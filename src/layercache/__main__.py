"""Allow running as ``python -m layercache``."""

from .app.cli.main import main

if __name__ == "__main__":
    main()
