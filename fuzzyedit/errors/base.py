class FuzzyEditError(Exception):
    """Root of every exception raised by fuzzyedit."""
