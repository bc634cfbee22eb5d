"""Allow running labelnotes with python -m."""

from .cli.main import main

main()
