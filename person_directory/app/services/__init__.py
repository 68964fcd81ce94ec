"""Service layer holding the SQL behind each API operation."""
