"""
Copyright (c) 2025. All rights reserved.
"""

from .word_count import cli

if __name__ == "__main__":
    cli()
