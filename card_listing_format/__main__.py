"""
Main entry point for the card-listing-format package.

This allows the package to be run as a module:
python -m card_listing_format
"""

from .cli.commands import main

if __name__ == '__main__':
    main()
