"""
Dash adapter: layout builders and callback registration around the core.
"""
