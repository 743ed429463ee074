"""Service layer: formatting operations reported as ServiceResult."""
