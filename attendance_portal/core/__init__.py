"""
Core building blocks shared by the API clients, stores and services.
"""
