"""
HTTP Basic authentication against customer and employee accounts.
"""

import logging

from django.contrib.auth.hashers import check_password, make_password
from rest_framework import exceptions
from rest_framework.authentication import BasicAuthentication

from apps.core.accounts import resolve_principal

logger = logging.getLogger(__name__)


class AccountBasicAuthentication(BasicAuthentication):
    """
    Resolve the request principal from HTTP Basic credentials.

    The username is the account's login identifier (email). On success
    ``request.user`` is a :class:`Principal`.
    """

    www_authenticate_realm = 'bank-records'

    def authenticate_credentials(self, userid, password, request=None):
        principal = resolve_principal(userid)

        if principal is None:
            # unknown identifiers still pay for one hash
            make_password(password)
            logger.warning("Authentication failed for login identifier %s", userid)
            raise exceptions.AuthenticationFailed('Invalid username/password.')

        if not check_password(password, principal.credential):
            logger.warning("Authentication failed for login identifier %s", userid)
            raise exceptions.AuthenticationFailed('Invalid username/password.')

        return (principal, None)
