"""
Domain exceptions for notes app.
"""
from rest_framework.exceptions import APIException


class NoteNotFoundError(APIException):
    status_code = 404
    default_detail = 'Note not found'
    default_code = 'note_not_found'
