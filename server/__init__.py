"""
Server modules for Booth Map application.

This package contains FastAPI router modules for the booth map endpoints
and the teams list.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2025-12-17
"""
