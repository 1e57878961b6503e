"""
Utilities package.

Provides helper functions used by the API and services.

Modules:
    geo: Geographic unit conversions and bearings (yards, meters, compass degrees)
"""
