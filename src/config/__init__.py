"""
Configuration loading and validation.

Provides the strongly typed settings object read from environment variables
(and .env files) with upfront validation.
"""
