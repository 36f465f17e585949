"""
Only the root tests directory carries an __init__.py.

It makes `tests` an importable package, so shared fixtures are imported as
`from tests.helpers.helper_hotel import ...` from any test module. Subdirectories
are namespace packages (PEP 420); test module basenames must stay unique because
pytest imports them by basename.
"""
