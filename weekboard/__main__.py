"""Allow running as `python -m weekboard`."""

from .cli.main import main

main()
