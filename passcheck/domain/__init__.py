"""
Domain layer package.

Contains pure business rules: value objects and port interfaces.
This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
