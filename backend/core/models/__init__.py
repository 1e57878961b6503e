"""
Data models package.

Modules:
    geo: GeoPoint value object
    equipment: Club, shape and trajectory catalogs
    shot: Wind input, input snapshot and shot result
    course: Holes and courses
"""
