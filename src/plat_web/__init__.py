"""
Web adapter for the Fifths Wheel: serves a wheel session as a JSON API for a
browser front end.
"""
