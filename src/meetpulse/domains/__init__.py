# src/meetpulse/domains/__init__.py
"""
Domain routers mounted by main.py.
"""
