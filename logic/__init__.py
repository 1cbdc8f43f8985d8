"""
Booth map logic: geometry normalization, booth aggregation, hit-testing,
view state and exhibit configuration.
"""
