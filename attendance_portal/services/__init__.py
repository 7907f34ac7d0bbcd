"""
Application services built on the session store and API clients.
"""
