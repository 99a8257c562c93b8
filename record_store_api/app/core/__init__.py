"""
Cross-cutting pieces shared by every layer: settings, logging setup and
domain errors.
"""
