"""
Core Domain Layer.

Pure generation logic: the symbol table, the gender model, the escaping
codec and the recursive instantiation engine. Nothing here reads files,
parses JSON or configures logging.
"""
