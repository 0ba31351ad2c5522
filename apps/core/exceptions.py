"""
Error taxonomy and DRF exception handler for the Bank Records API.

Every failure leaves the API as the uniform envelope
``{status, code, message, data}`` with ``status`` set to ``False``.
"""

import enum
import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.exceptions import APIException

from apps.core.principal import Principal
from apps.core.responses import envelope

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    """Closed set of failure kinds and the status code each maps to."""

    ALREADY_REGISTERED = ('already_registered', status.HTTP_409_CONFLICT)
    ALREADY_ADDED = ('already_added', status.HTTP_409_CONFLICT)
    ALREADY_EXISTS = ('already_exists', status.HTTP_409_CONFLICT)
    NOT_FOUND = ('not_found', status.HTTP_404_NOT_FOUND)
    UNAUTHORIZED = ('unauthorized', status.HTTP_403_FORBIDDEN)
    INCONSISTENT = ('inconsistent', status.HTTP_400_BAD_REQUEST)
    INVALID_IDENTIFIER = ('invalid_identifier', status.HTTP_400_BAD_REQUEST)
    VALIDATION_FAILED = ('validation_failed', status.HTTP_400_BAD_REQUEST)
    ACCESS_DENIED = ('access_denied', status.HTTP_403_FORBIDDEN)
    UNAUTHENTICATED = ('unauthenticated', status.HTTP_401_UNAUTHORIZED)
    METHOD_NOT_ALLOWED = ('method_not_allowed', status.HTTP_405_METHOD_NOT_ALLOWED)
    NOT_IMPLEMENTED = ('not_implemented', status.HTTP_501_NOT_IMPLEMENTED)
    INTERNAL = ('internal', status.HTTP_500_INTERNAL_SERVER_ERROR)

    def __init__(self, slug, status_code):
        self.slug = slug
        self.status_code = status_code


class ServiceError(APIException):
    """
    Base class for every typed failure raised by the service layer.

    Subclasses pick a ``kind`` and a fixed ``default_detail``; the HTTP
    status code always follows the kind.
    """

    kind = ErrorKind.INTERNAL
    status_code = ErrorKind.INTERNAL.status_code
    default_code = ErrorKind.INTERNAL.slug
    default_detail = 'Server side error'

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.status_code = cls.kind.status_code
        cls.default_code = cls.kind.slug


class EmailAlreadyRegisteredError(ServiceError):
    kind = ErrorKind.ALREADY_REGISTERED
    default_detail = 'Email address provided is already registered with an account'


class InvalidEmailAddressError(ServiceError):
    kind = ErrorKind.INVALID_IDENTIFIER
    default_detail = 'Email address is in invalid format'


class CustomerDetailsAlreadyAddedError(ServiceError):
    kind = ErrorKind.ALREADY_ADDED
    default_detail = 'Customer details for this id is already added'


class EmployeeDetailsAlreadyAddedError(ServiceError):
    kind = ErrorKind.ALREADY_ADDED
    default_detail = 'Employee details for this id is already added'


class OfferingAlreadyAddedError(ServiceError):
    kind = ErrorKind.ALREADY_EXISTS
    default_detail = 'Offering details for this customer is already added'


class CustomerNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_detail = 'There are no customers in the database with this id'


class EmployeeNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_detail = 'There are no employees in the database with this id'


class OfferingNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_detail = 'There are no offerings in the database for this customer'


class LoanNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_detail = 'There are no loans in the database for this customer with this number'


class LockerNotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    default_detail = 'There are no lockers in the database for this customer with this number'


class UnauthorizedCustomerError(ServiceError):
    kind = ErrorKind.UNAUTHORIZED
    default_detail = 'Customer is not authorized to perform this action on the resource'


class UnauthorizedEmployeeError(ServiceError):
    kind = ErrorKind.UNAUTHORIZED
    default_detail = 'Employee is not authorized to perform this action on the resource'


class InconsistentDetailsError(ServiceError):
    kind = ErrorKind.INCONSISTENT
    default_detail = 'Inconsistent details found in the request'


class OfferingUpdateNotSupportedError(ServiceError):
    kind = ErrorKind.NOT_IMPLEMENTED
    default_detail = 'Updating offering details is not supported'


# Fixed client-facing messages for framework-raised failures
FRAMEWORK_ERRORS = (
    ((exceptions.ValidationError, exceptions.ParseError),
     ErrorKind.VALIDATION_FAILED, 'Request arguments are not valid'),
    ((exceptions.NotAuthenticated, exceptions.AuthenticationFailed),
     ErrorKind.UNAUTHENTICATED, 'Authentication credentials were not provided or are invalid'),
    ((exceptions.PermissionDenied,),
     ErrorKind.ACCESS_DENIED, 'User is not authorized to make this request'),
    ((exceptions.NotFound, Http404),
     ErrorKind.NOT_FOUND, 'The requested resource was not found'),
    ((exceptions.MethodNotAllowed,),
     ErrorKind.METHOD_NOT_ALLOWED, 'Request method is not allowed on this resource'),
    ((exceptions.UnsupportedMediaType, exceptions.NotAcceptable),
     ErrorKind.VALIDATION_FAILED, 'Request arguments are not valid'),
)


def _acting_principal(context):
    request = context.get('request')
    user = getattr(request, 'user', None)
    if isinstance(user, Principal):
        return user
    return None


def _log_failure(kind, exc, context):
    principal = _acting_principal(context)
    if principal is not None:
        logger.error(
            "%s (%s) occurred for user %s",
            type(exc).__name__,
            kind.name,
            principal.email,
        )
    else:
        logger.error("%s (%s) occurred", type(exc).__name__, kind.name)


def custom_exception_handler(exc, context):
    """
    DRF exception handler that renders every failure as an envelope.

    Typed service errors keep their fixed message; framework errors get a
    fixed message per kind; anything else is an internal error whose text
    never reaches the client.
    """
    if isinstance(exc, ServiceError):
        _log_failure(exc.kind, exc, context)
        return envelope(
            str(exc.detail),
            status=exc.status_code,
            success=False,
        )

    for exc_types, kind, message in FRAMEWORK_ERRORS:
        if isinstance(exc, exc_types):
            _log_failure(kind, exc, context)
            data = None
            if isinstance(exc, exceptions.ValidationError):
                data = exc.detail
            headers = None
            auth_header = getattr(exc, 'auth_header', None)
            if auth_header:
                headers = {'WWW-Authenticate': auth_header}
            return envelope(
                message,
                data=data,
                status=kind.status_code,
                success=False,
                headers=headers,
            )

    # Unhandled exceptions, store failures included: log and return 500
    principal = _acting_principal(context)
    if principal is not None:
        logger.exception(
            "Unhandled exception in %s for user %s",
            context.get('view', 'unknown'),
            principal.email,
            exc_info=exc,
        )
    else:
        logger.exception(
            "Unhandled exception in %s",
            context.get('view', 'unknown'),
            exc_info=exc,
        )
    return envelope(
        ServiceError.default_detail,
        status=ErrorKind.INTERNAL.status_code,
        success=False,
    )
