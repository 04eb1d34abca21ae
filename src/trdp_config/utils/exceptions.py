# src/trdp_config/utils/exceptions.py

class TrdpConfigError(Exception):
    """Base exception class for the TRDP configuration service"""
    pass

class ConfigurationError(TrdpConfigError):
    """Raised when the service configuration file is missing or invalid"""
    pass

class InitializationError(TrdpConfigError):
    """Raised when component initialization fails"""
    pass

class MalformedDocument(TrdpConfigError):
    """Raised when a device document cannot be parsed or has no device root"""
    pass

class IOUnavailable(TrdpConfigError):
    """Raised when stored document bytes cannot be read"""
    pass

class ConfigNotFoundError(TrdpConfigError):
    """Raised when no stored configuration matches the requested id"""
    pass

class InvalidUploadError(TrdpConfigError):
    """Raised when an uploaded file is rejected"""
    pass

class EngineStateError(TrdpConfigError):
    """Raised on a disallowed runtime engine state transition"""
    pass

class DatabaseError(TrdpConfigError):
    """Base exception for metadata database errors"""
    pass

class ConnectionPoolError(DatabaseError):
    """Exception for connection pool related errors"""
    pass
