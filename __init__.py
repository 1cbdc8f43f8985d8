"""
Booth Map application.

A FastAPI-powered exhibition floor map: booth markers aggregated from point
annotations, category filtering, click and hover hit-testing, and a teams
list read from a spreadsheet.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2025-12-17
"""
