"""
Generic utility modules shared across the package.

Includes the clock abstraction, the uniform integer range sampler and
logging setup.
"""
