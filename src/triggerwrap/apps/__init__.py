"""
Application entry points for triggerwrap.
"""
