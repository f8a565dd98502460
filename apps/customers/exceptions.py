"""
Domain exceptions for customers app.
"""
from rest_framework.exceptions import APIException


class CustomerNotFoundError(APIException):
    status_code = 404
    default_detail = 'Customer not found'
    default_code = 'customer_not_found'
