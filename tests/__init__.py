"""
Test Suite for genere.

Organization:
- `core`: escaping, symbol table, gender forms and the instantiation engine.
- `adapters`: JSON table loading.
- `shared`: configuration and logging.
- top level: the Generator facade and the command-line front end.
"""
