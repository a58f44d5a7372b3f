"""
backend

HTTP service layer for Stock Money AI (FastAPI).
"""
