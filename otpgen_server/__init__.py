"""
Flask backend exposing the otpgen core as a stateless JSON API.
"""

from .app import create_app

__all__ = ['create_app']
