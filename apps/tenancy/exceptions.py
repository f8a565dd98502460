"""
Domain exceptions for tenancy app.
"""
from rest_framework.exceptions import APIException


class FlatNotFoundError(APIException):
    status_code = 404
    default_detail = 'Flat not found'
    default_code = 'flat_not_found'


class TenantNotFoundError(APIException):
    status_code = 404
    default_detail = 'Tenant not found'
    default_code = 'tenant_not_found'


class RentRecordNotFoundError(APIException):
    status_code = 404
    default_detail = 'Rent record not found'
    default_code = 'rent_record_not_found'
