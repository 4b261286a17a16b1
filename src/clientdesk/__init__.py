"""Organization-scoped client and project record store."""
