"""
FILE: weekboard/core/__init__.py
PURPOSE: Board model, history, persistence and export
"""
