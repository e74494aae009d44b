"""
Copyright (c) 2025. All rights reserved.
"""

"""
Test suite for the word frequency counter.

Covers word extraction, the frequency table, top-K selection and the
command line driver, including the error paths for missing files and
failed table operations.
"""
