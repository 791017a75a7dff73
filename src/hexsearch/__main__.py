"""Main entry point for `python -m hexsearch`."""

from hexsearch import main

main()
