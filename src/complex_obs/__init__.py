"""
Complex Obs - file-backed storage for text complex observations

Persists the text payload of a clinical observation to a file and records
the file name on the observation, then reads it back on request.
"""

__version__ = "0.1.0"
