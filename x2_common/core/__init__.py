"""Core utilities and shared infrastructure.

- config: Logging configuration read from environment variables
- constants: Environment variable names and log option tokens
- exceptions: The X2 error kinds
"""
