"""
Error Taxonomy

Every error carries the HTTP status it maps to and a message that is safe
to show the user.
"""


class QuillError(Exception):
    """Base class for errors surfaced to the client."""
    status_code = 500
    message = 'Server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(QuillError):
    """Submitted form data is unusable."""
    status_code = 400
    message = 'Invalid input'


class AuthError(QuillError):
    """Credentials did not match a user."""
    status_code = 401
    message = 'Invalid email or password'


class NotFoundError(QuillError):
    """The post is missing, or not owned by the requesting user."""
    status_code = 404
    message = 'Post not found'


class ServerError(QuillError):
    """A store or filesystem failure."""
    status_code = 500


class ConflictError(ServerError):
    """The store refused an insert."""
