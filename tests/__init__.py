"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out for simplicity.

It makes `tests` importable as a package, so shared helpers are imported as
`from tests.helpers... import ...`. Test subdirectories work as namespace packages
(PEP 420) and need no __init__.py of their own.
"""
