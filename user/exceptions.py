class ResourceNotFoundException(Exception):
    pass

class DuplicateResourceException(Exception):
    pass

class InvalidCredentialsException(Exception):
    pass

class InvalidTokenException(Exception):
    pass

class TokenExpiredException(Exception):
    pass

class GstLookupException(Exception):
    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.status_code = status_code
