class ErrorCode:
    AUTH_CONTEXT_REQUIRED = "auth_context_required"
    VALIDATION_ERROR = "validation_error"
    DATABASE_ERROR = "database_error"
    INTERNAL_SERVER_ERROR = "internal_server_error"
