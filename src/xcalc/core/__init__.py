"""
xcalc core: expression IR, language front end, errors, and configuration.
"""
