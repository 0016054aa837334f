"""
Application Layer for the FitTrack API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Business operations orchestrating domain objects and ports
- exceptions.py: Error taxonomy mapped to HTTP statuses by backend/errors.py
"""
