"""
Application Layer for the Training Log API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Application workflows coordinating ports and domain logic
"""
