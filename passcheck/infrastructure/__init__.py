"""
Infrastructure layer package.

Contains adapters that implement domain ports.
Adapters may perform IO; the domain never imports from here.
"""
