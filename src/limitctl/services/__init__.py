"""Service layer — adapts the pure domain engine to ServiceResult."""
